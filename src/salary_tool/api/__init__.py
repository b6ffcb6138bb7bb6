"""API subpackage - FastAPI transport for the salary engine."""
