"""Allow `python -m portal` to start the API server."""
from portal.cli import main

main()
