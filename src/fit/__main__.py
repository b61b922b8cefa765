"""fit CLI bootstrap."""

from fit.cli import run

if __name__ == "__main__":
    run()
