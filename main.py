#!/usr/bin/env python3
"""
Accordion Widget Demo - Main Entry Point

Run this file to start the demo window from a source checkout.

Usage:
    python main.py [options]
"""

import sys
from pathlib import Path

# Add the src directory to Python path to enable imports
project_root = Path(__file__).parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

try:
    from ctk_accordion.main import main

    if __name__ == "__main__":
        sys.exit(main())

except ImportError as e:
    print(f"Error: Failed to import ctk_accordion module: {e}")
    print("Please ensure you're running from the project root directory.")
    print("Try installing the package in development mode:")
    print("  pip install -e .")
    sys.exit(1)
