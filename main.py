# main.py
"""
Main entry point for Stillworld.
"""
from stillworld.core.safe_main import main

if __name__ == '__main__':
    raise SystemExit(main())
