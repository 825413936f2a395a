"""Python specification of a zero-knowledge certificate registry."""
