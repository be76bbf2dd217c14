"""Route filtering, per-carrier minimum flight times and price statistics for ticket batches."""
