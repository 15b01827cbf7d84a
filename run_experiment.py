"""
Run Tower of Hanoi agents from the command line.

Example:
    python run_experiment.py --agent random --games 20 --max-steps 2000
"""

import sys

from experiments.hanoi_experiment import main

if __name__ == "__main__":
    main(sys.argv[1:])
