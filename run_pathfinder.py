#!/usr/bin/env python3
"""
Launcher script for the grid route finder.
This script sets up the Python path and runs the command-line entry point.
"""

import sys
import os

# Add the project root to Python path so that 'gridpath' and 'config' can be imported
project_root = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, project_root)

if __name__ == "__main__":
    from gridpath.main import main
    # Pass all command-line arguments to the main function
    sys.exit(main(sys.argv[1:]))
