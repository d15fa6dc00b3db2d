#!/usr/bin/env python3
"""
Image to ASCII Art Converter
============================
Create ASCII images from jpg, png and gif files.

Features:
- Aspect-correcting downscale and character ramp mapping
- Built-in 10 and 70 character ramps or a custom ramp
- Animated GIF playback in the terminal
- Truecolor or 256-color terminal output
- Re-encoding to png, jpg and animated gif

Run ``python main.py --help`` for the command line options.
"""

import sys

from asciiframe.cli import main


if __name__ == '__main__':
    sys.exit(main())
