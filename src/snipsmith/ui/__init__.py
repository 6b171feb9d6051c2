"""User-facing interfaces for snipsmith."""
