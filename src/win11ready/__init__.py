"""Windows 11 upgrade readiness checks."""
