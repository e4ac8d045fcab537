"""
loctok - Main Entry Point

Chay truc tiep tu source tree:
    python main.py [PATH] --format json
"""

from cli.main import run


if __name__ == "__main__":
    run()
