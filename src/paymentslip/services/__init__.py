"""Stateless helpers: check digits and block formatting."""
