#!/usr/bin/env python3
"""
Catalog Variant Grouping Runner

Groups supplier catalog items into products with variants.

Usage:
    python scripts/run_variant_grouping.py --input itlCanada.csv --dry-run
    python scripts/run_variant_grouping.py --input itlCanada.csv --query "PRIORITY GTX" --confirm
    python scripts/run_variant_grouping.py --detect "JACKET - BLACK (S)" "JACKET - BLACK (M)"
    python scripts/run_variant_grouping.py --serve --port 5001
"""

import sys
from pathlib import Path

# Add scripts directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from variant_grouping.runner import main


if __name__ == "__main__":
    sys.exit(main())
