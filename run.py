#!/usr/bin/env python3
"""
Chat Translator - Local Server
==============================
Start the query API a launcher plugin talks to.

Usage:
    python run.py
    python run.py --port 5003 --quiet-period 0.5
"""
import argparse
import os
import sys
from pathlib import Path

# Add package to path if running directly
package_dir = Path(__file__).parent
if str(package_dir) not in sys.path:
    sys.path.insert(0, str(package_dir))


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Chat Translator query server")
    parser.add_argument('--host', help="interface to bind")
    parser.add_argument('--port', type=int, help="port to listen on")
    parser.add_argument('--quiet-period', type=float, help="debounce window in seconds")
    parser.add_argument('--data-dir', help="where the token and response log live")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    # Config is read from the environment at import time
    if args.host:
        os.environ['CHAT_TRANSLATOR_HOST'] = args.host
    if args.port:
        os.environ['CHAT_TRANSLATOR_PORT'] = str(args.port)
    if args.quiet_period is not None:
        os.environ['DEBOUNCE_QUIET_PERIOD'] = str(args.quiet_period)
    if args.data_dir:
        os.environ['CHAT_TRANSLATOR_DATA_DIR'] = args.data_dir

    from chat_translator.app import run_server
    run_server()


if __name__ == '__main__':
    main()
