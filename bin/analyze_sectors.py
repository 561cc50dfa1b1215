#!/usr/bin/env python3
"""
Sector Network Analysis CLI

Thin wrapper so the CLI runs from a source checkout without installing.

Usage:
    python bin/analyze_sectors.py --input sectors.json --seed 42
    python bin/analyze_sectors.py --api-url http://localhost:5000 --json
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sectorgraph.cli import main


if __name__ == "__main__":
    sys.exit(main())
