"""
Solar Resource Test Suite

- test_config.py: env-sourced credential, masking
- test_prepare.py: typed decode, scalar flattening, table shape
- test_ingest.py: HTTP / content-type / malformed-payload gates
- test_validate.py: monthly table integrity report
- test_cli.py: typer entry point
"""
