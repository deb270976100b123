"""Service layer — adapts the pure domain to the CLI's result contract.

Services never write to streams themselves; the caller supplies sinks for
output lines and diagnostics, and receives a ServiceResult.
"""
