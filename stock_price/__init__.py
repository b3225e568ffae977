"""Yahoo Finance quote lookup, independent of any RPC transport."""
