"""python -m vqplot"""
import sys

from vqplot.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
