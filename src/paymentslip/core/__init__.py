"""Configuration, errors, sentinels and protocols shared by the payment slip core."""
