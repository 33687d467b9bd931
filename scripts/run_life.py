"""
Run the console Game of Life animation until interrupted
"""
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from torus_life.driver import main


if __name__ == "__main__":
    main()
