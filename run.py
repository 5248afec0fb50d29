#!/usr/bin/env python3
"""
Starts the MiniLang IDE
"""
import os
import sys
import webbrowser
from threading import Timer

import uvicorn

BASE_DIR = os.path.dirname(os.path.abspath(__file__))

REQUIRED_FILES = [
    'main.py', 'lexer.py', 'parser.py', 'interpreter.py',
    'ast_nodes.py', 'errors.py', 'pipeline.py',
]

def get_settings():
    """Host, port and browser flag, overridable through the environment."""
    host = os.environ.get('MINILANG_HOST', '0.0.0.0')
    port = int(os.environ.get('MINILANG_PORT', '8000'))
    open_browser = not os.environ.get('MINILANG_NO_BROWSER')
    return host, port, open_browser

def missing_files(base_dir=BASE_DIR):
    return [f for f in REQUIRED_FILES if not os.path.exists(os.path.join(base_dir, f))]

def open_browser(port):
    print("Opening browser...")
    webbrowser.open(f'http://localhost:{port}')

def main():
    print("MiniLang IDE")
    print("=" * 50)

    missing = missing_files()
    if missing:
        print("Required files not found:")
        for file in missing:
            print(f"   - {file}")
        print("\nMake sure every project file is in the project folder.")
        sys.exit(1)

    if not os.path.exists(os.path.join(BASE_DIR, 'static', 'index.html')):
        print("static/index.html not found!")
        sys.exit(1)

    print("All files found.")
    host, port, browser = get_settings()
    print(f"Starting FastAPI server on {host}:{port}...")

    if browser:
        timer = Timer(2.0, open_browser, args=(port,))
        timer.start()

    try:
        uvicorn.run("main:app", host=host, port=port, reload=True, app_dir=BASE_DIR)
    except KeyboardInterrupt:
        print("\nServer stopped. Bye!")

if __name__ == "__main__":
    main()
