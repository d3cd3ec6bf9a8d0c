"""Allow ``python -m fcfs_seek``."""

from fcfs_seek.cli import run

if __name__ == "__main__":
    run()
