"""
Entry point for running snippet_injector as a module.

Usage:
    python -m snippet_injector inject --config codesnippets.yaml
    python -m snippet_injector verify --config codesnippets.yaml
    python -m snippet_injector list --codesnippet-root src/samples/java
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
