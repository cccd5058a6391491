import sys

from fioplot.plot_results import main

if __name__ == "__main__":
    sys.exit(main())
