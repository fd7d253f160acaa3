#!/usr/bin/env python
"""
Helper script to build the scalepad-client wheel and sdist.
"""
import glob
import shutil
import subprocess
import sys
import os

def main():
    """Build the package."""
    print("Building scalepad-client...")
    
    # Clean previous builds
    for path in ["build", "dist", *glob.glob("*.egg-info")]:
        if os.path.isdir(path):
            print(f"Cleaning {path}...")
            shutil.rmtree(path)
    
    try:
        subprocess.check_call([sys.executable, "-m", "build", "--wheel", "--sdist"],
                            cwd=os.getcwd())
        print("\n✓ Package built successfully!")
        print("\nTo install locally:")
        print("  pip install dist/scalepad_client-*.whl")
        print("\nOr in development mode:")
        print("  pip install -e '.[test]'")
    except subprocess.CalledProcessError as e:
        print(f"\n✗ Build failed: {e}")
        sys.exit(1)

if __name__ == "__main__":
    main()
