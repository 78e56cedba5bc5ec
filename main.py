"""
Main CLI Entry Point
Run: python main.py available example.com
"""

from enom_client.cli.main import main


if __name__ == "__main__":
    main()
