"""
Allow running the package with: python -m shapegallery

By default, launches the web server.

Examples:
    python -m shapegallery                         # Launch server
    python -m shapegallery serve --port 8080       # Launch server (explicit)
    python -m shapegallery list --label circle     # Print stored images
    python -m shapegallery config --init           # Create example config file
"""

import argparse
import sys
from datetime import datetime

from .config import LABELS, QUALITIES


def list_images(argv=None) -> int:
    """Print stored images, newest first."""
    from .storage import ImageStore
    from .user_config import get_user_config

    parser = argparse.ArgumentParser(prog='shapegallery list', description='List stored images')
    parser.add_argument('--root', default=get_user_config().public_dir,
                        help='Public directory holding the shapes folder')
    parser.add_argument('--label', choices=LABELS, help='Only show this shape')
    parser.add_argument('--quality', choices=QUALITIES, help='Only show this quality')
    args = parser.parse_args(argv)

    store = ImageStore(args.root)
    if args.label and args.quality:
        records = store.get_by_label_and_quality(args.label, args.quality)
    elif args.label:
        records = store.get_by_label(args.label)
    elif args.quality:
        records = store.get_by_quality(args.quality)
    else:
        records = store.get_all()
    records = sorted(records, key=lambda r: r.timestamp, reverse=True)

    for record in records:
        when = datetime.fromtimestamp(record.timestamp / 1000).strftime('%Y-%m-%d %H:%M:%S')
        print(f"{when}  {record.label:<8}  {record.quality:<9}  {record.file_path}")
    print(f"\n{len(records)} image(s) in {store.shapes_dir}")
    return 0


def show_config(argv=None) -> int:
    from .user_config import get_user_config

    config = get_user_config()
    argv = sys.argv[1:] if argv is None else argv

    if '--init' in argv or '-i' in argv:
        if config.create_example_config():
            print("Created example configuration file at:")
            print(f"  {config.config_file_path}")
            print("\nEdit this file to customize Shape Gallery settings.")
            return 0
        print("Failed to create configuration file.")
        return 1

    print(f"Configuration file: {config.config_file_path}")
    if config.config_file_path.exists():
        print("Status: found")
    else:
        print("Status: not found (using defaults)")
        print("\nRun 'python -m shapegallery config --init' to create one.")

    print("\nCurrent settings:")
    print(f"  public_dir: {config.public_dir}")
    print(f"  host: {config.host}")
    print(f"  port: {config.port}")
    print(f"  log_level: {config.log_level}")
    return 0


def main():
    command = sys.argv[1] if len(sys.argv) > 1 else None

    if command == 'list':
        sys.exit(list_images(sys.argv[2:]))
    elif command == 'config':
        sys.exit(show_config(sys.argv[2:]))
    else:
        if command == 'serve':
            sys.argv.pop(1)
        from .app import main as serve_main
        serve_main()


if __name__ == '__main__':
    main()
