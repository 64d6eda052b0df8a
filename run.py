#!/usr/bin/env python3
from pranalyzer.gui.main_interface import main

if __name__ == '__main__':
    main()
