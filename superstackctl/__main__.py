"""Run the VLAN CLI with ``python -m superstackctl``."""

from superstackctl.cli import main

if __name__ == "__main__":
    main()
