"""Run the RustFS bucket/object walkthrough using RUSTFS_* environment variables."""

from __future__ import annotations

from rustfs_demo.demo import main

if __name__ == "__main__":
    main()
