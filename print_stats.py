#!/usr/bin/env python3
"""
constats — Sample Statistics Report
===================================
Thin entry-point. All logic lives in constats.driver.

Modes:
  From file:   python3 print_stats.py samples.txt
  From stdin:  seq 1 100 | python3 print_stats.py -
  Random:      python3 print_stats.py --random 10000000 --seed 7
"""

from constats.driver.cli import main

if __name__ == "__main__":
    main()
