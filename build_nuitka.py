#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
build_nuitka.py - Nuitka build script for Clip2Arena
Compiles the GUI into a single executable
"""

import os
import shutil
import subprocess
import sys

APP_NAME = "Clip2Arena"
OUTPUT_DIR = "nuitka_dist"


def exe_name() -> str:
    return f"{APP_NAME}.exe" if sys.platform == "win32" else APP_NAME


def check_requirements():
    """Check if Nuitka is installed"""
    try:
        result = subprocess.run(
            [sys.executable, '-m', 'nuitka', '--version'],
            capture_output=True, text=True
        )
    except OSError:
        result = None
    if result is None or result.returncode != 0:
        print("✗ Nuitka not installed")
        print("  Run: pip install nuitka")
        return False
    print(f"✓ {result.stdout.strip().splitlines()[0]}")
    return True


def clean_build():
    """Clean previous builds"""
    for dir_name in ('main.build', 'main.dist', 'main.onefile-build', OUTPUT_DIR):
        if os.path.exists(dir_name):
            shutil.rmtree(dir_name, ignore_errors=True)
            print(f"✓ Removed {dir_name}")


def build_command() -> list:
    cmd = [
        sys.executable, '-m', 'nuitka',
        '--standalone',
        '--onefile',
        f'--output-filename={exe_name()}',
        f'--output-dir={OUTPUT_DIR}',
        '--enable-plugin=tk-inter',         # customtkinter
        '--include-package=clip2arena',
        '--include-package=customtkinter',
        '--include-package=pyperclip',
        '--include-package=requests',
        '--include-package=dotenv',
        '--assume-yes-for-downloads',
        '--remove-output',
    ]
    if sys.platform == "win32":
        cmd.append('--windows-console-mode=disable')
        ico_path = 'assets/icon.ico'
        if os.path.exists(ico_path):
            cmd.append(f'--windows-icon-from-ico={ico_path}')
    cmd.append('main.py')
    return cmd


def build_nuitka():
    """Build using Nuitka"""
    print("\n🔨 Building with Nuitka...")
    cmd = build_command()
    print("Command:", ' '.join(cmd))
    print("-" * 60)

    result = subprocess.run(cmd)

    exe_path = os.path.join(OUTPUT_DIR, exe_name())
    if result.returncode == 0 and os.path.exists(exe_path):
        size_mb = os.path.getsize(exe_path) / (1024 * 1024)
        print("-" * 60)
        print(f"✓ Output: {exe_path} ({size_mb:.1f} MB)")
        return True

    print("✗ Build failed!")
    return False


if __name__ == '__main__':
    print(f"🚀 {APP_NAME} - Nuitka Builder")
    print("=" * 60)

    if not check_requirements():
        sys.exit(1)

    clean_build()

    if build_nuitka():
        print("\n✅ Build complete!")
    else:
        sys.exit(1)
