import logging
import sys

from app import app
from loader import load_directory

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

HOST = '127.0.0.1'
PORT = 3030


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("Usage: mdrender <folder_with_markdown>", file=sys.stderr)
        sys.exit(1)

    folder = args[0]
    try:
        store = load_directory(folder)
    except (OSError, UnicodeDecodeError) as e:
        logging.error(f"Error loading markdown files: {e}")
        sys.exit(1)

    app.config['DOCUMENTS'] = store

    print(f"Server started at http://localhost:{PORT}")
    print("Press Ctrl+C to stop")
    app.run(host=HOST, port=PORT)


if __name__ == '__main__':
    main()
