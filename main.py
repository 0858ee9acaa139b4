# main.py
from reversi.cli import main

if __name__ == "__main__":
    main()
