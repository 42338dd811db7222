"""Live loan and retirement-investment calculator cards."""
