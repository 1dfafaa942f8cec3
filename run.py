"""
Entry Point Script (Bootstrap)
==============================
Development runner for the command-line interface.

Why is this file needed?
------------------------
1. It is located outside the 'src' package to act as a convenient runner.
2. It puts 'src' on 'sys.path' so 'from hypershape...' resolves without
   installing the package first.

Usage:
    $ python run.py tesseract --rotation 0 0 30 45 --degrees --plot
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from hypershape.__main__ import main

if __name__ == "__main__":
    sys.exit(main())
