"""
Run with: python -m parkingvisualizer
"""
import sys

from parkingvisualizer.main import main

if __name__ == "__main__":
    sys.exit(main())
