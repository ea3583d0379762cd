"""Integration tests for the command-line interface.

These tests run the installed package in a subprocess and cover:
- Document and tree-only output
- Depth limits and truncation markers
- Ignore patterns, default ignores and gitignore-style exclusion files
- Summaries, output files and exit codes
- Symlink following
"""

import os
import re
import subprocess
import sys
from pathlib import Path

import pytest

# These tests are slow; only run them when asked for with --run-cli-tests
pytestmark = pytest.mark.skipif(
    "not config.getoption('--run-cli-tests')", reason="Only run when --run-cli-tests is given"
)


@pytest.fixture
def temp_project(tmp_path):
    """Create a temporary project directory with test files."""
    base_dir = tmp_path / "proj"
    (base_dir / "src" / "utils").mkdir(parents=True)
    (base_dir / "docs").mkdir()
    (base_dir / "node_modules").mkdir()
    (base_dir / "build").mkdir()

    (base_dir / "src" / "main.py").write_text("def main():\n    print('Hello')\n")
    (base_dir / "src" / "utils" / "helpers.py").write_text("def helper():\n    pass\n")
    (base_dir / "src" / "main.pyc").write_bytes(b"compiled python")
    (base_dir / "docs" / "README.md").write_text("# Test Project\n")
    (base_dir / "server.log").write_text("DEBUG: test log\n")
    (base_dir / "package.json").write_text('{"name": "test"}\n')
    (base_dir / "build" / "output.min.js").write_text("console.log('test')\n")
    (base_dir / "node_modules" / "module.js").write_text("export default {}\n")

    (tmp_path / "project.gitignore").write_text("*.pyc\nbuild/\n")
    (tmp_path / "docs.ignore").write_text("docs/\n")

    return base_dir


def run_cli(args, cwd=None, timeout=10):
    """Run the dir2tree CLI with the given arguments.

    Args:
        args: List of CLI arguments
        cwd: Working directory
        timeout: Maximum time to wait for command to complete

    Returns:
        CompletedProcess object with stdout/stderr as text
    """
    cmd = [sys.executable, "-m", "dir2tree"] + args
    return subprocess.run(
        cmd, stdout=subprocess.PIPE, stderr=subprocess.PIPE, text=True, encoding="utf-8", cwd=cwd, timeout=timeout
    )


def test_cli_document_output(temp_project):
    result = run_cli([str(temp_project)])

    assert result.returncode == 0
    assert result.stdout.startswith("# File Tree for: proj\n")
    assert f"Path: {temp_project}\n" in result.stdout
    assert "Max Depth: Unlimited\n" in result.stdout
    assert "Ignored Patterns: node_modules, .git\n" in result.stdout
    assert "node_modules" not in result.stdout.split("```")[1]
    assert result.stdout.endswith("```\n")


def test_cli_tree_only(temp_project):
    result = run_cli(["-T", str(temp_project)])

    assert result.returncode == 0
    assert result.stdout == (
        "├── build/\n"
        "│   └── output.min.js\n"
        "├── docs/\n"
        "│   └── README.md\n"
        "├── src/\n"
        "│   ├── utils/\n"
        "│   │   └── helpers.py\n"
        "│   ├── main.py\n"
        "│   └── main.pyc\n"
        "├── package.json\n"
        "└── server.log\n"
    )


def test_cli_max_depth(temp_project):
    result = run_cli(["-T", "-d", "1", "-n", str(temp_project)])

    assert result.returncode == 0
    assert result.stdout.splitlines()[:2] == ["├── build/", "│   ..."]
    assert "helpers.py" not in result.stdout
    assert "main.py" not in result.stdout


def test_cli_ignore_patterns(temp_project):
    result = run_cli(["-T", "-i", "*.log,*.pyc", "-i", "docs", str(temp_project)])

    assert result.returncode == 0
    assert "server.log" not in result.stdout
    assert "main.pyc" not in result.stdout
    assert "docs/" not in result.stdout
    # Explicit patterns replace the defaults
    assert "node_modules/" in result.stdout


def test_cli_multiple_exclusion_files(temp_project):
    gitignore = str(temp_project.parent / "project.gitignore")
    docs_ignore = str(temp_project.parent / "docs.ignore")
    result = run_cli(["-T", "-e", gitignore, "--exclude", docs_ignore, str(temp_project)])

    assert result.returncode == 0
    assert "main.pyc" not in result.stdout
    assert "build/" not in result.stdout
    assert "docs/" not in result.stdout
    assert "main.py" in result.stdout


def test_cli_missing_exclusion_file(temp_project):
    result = run_cli(["-e", str(temp_project / "missing.ignore"), str(temp_project)])

    assert result.returncode == 2
    assert "Rules file not found" in result.stderr


def test_cli_output_file(temp_project, tmp_path):
    output_path = tmp_path / "tree.md"
    result = run_cli(["-o", str(output_path), "-s", "stderr", str(temp_project)])

    assert result.returncode == 0
    assert result.stdout == ""
    assert "Directories: 4\nFiles: 7" in result.stderr
    content = output_path.read_text(encoding="utf-8")
    assert content.startswith("# File Tree for: proj\n")
    assert "└── server.log\n```\n" in content


def test_cli_summary_to_stdout(temp_project):
    result = run_cli(["-T", "-s", "stdout", str(temp_project)])

    assert result.returncode == 0
    assert result.stdout.endswith("\nDirectories: 4\nFiles: 7\n")


def test_cli_empty_directory(tmp_path):
    empty = tmp_path / "empty"
    empty.mkdir()

    tree_result = run_cli(["-T", str(empty)])
    document_result = run_cli([str(empty)])

    assert tree_result.returncode == 0
    assert tree_result.stdout == ""
    assert "Warning: No entries to show." in tree_result.stderr
    assert document_result.stdout.endswith("\n\n```\n```\n")


def test_cli_errors(temp_project, tmp_path):
    missing = run_cli([str(tmp_path / "missing")])
    not_dir = run_cli([str(temp_project / "package.json")])
    bad_pattern = run_cli(["-i", "src/*", str(temp_project)])
    bad_depth = run_cli(["-d", "0", str(temp_project)])

    assert missing.returncode == 1
    assert "Root path does not exist" in missing.stderr
    assert not_dir.returncode == 1
    assert "Root path is not a directory" in not_dir.stderr
    assert bad_pattern.returncode == 1
    assert "Use *.extension for file patterns" in bad_pattern.stderr
    assert bad_depth.returncode == 2


@pytest.mark.skipif(os.geteuid() == 0, reason="root can list unreadable directories")
def test_cli_unreadable_directory(temp_project):
    locked = temp_project / "docs"
    locked.chmod(0)
    try:
        result = run_cli([str(temp_project)])
    finally:
        locked.chmod(0o755)

    assert result.returncode == 126
    assert result.stdout == ""
    assert "Cannot list directory" in result.stderr


def test_cli_follow_symlinks(temp_project):
    try:
        os.symlink(temp_project / "src", temp_project / "src_link")
    except (OSError, NotImplementedError):
        pytest.skip("Symlink creation not supported on this platform/environment")

    result = run_cli(["-T", str(temp_project)])

    assert result.returncode == 0
    assert "├── src_link/\n│   ├── utils/\n" in result.stdout


def test_cli_version_info():
    result_short = run_cli(["-V"])
    result_long = run_cli(["--version"])

    assert result_short.returncode == 0
    assert result_short.stdout == result_long.stdout
    assert re.search(r"dir2tree \d+\.\d+\.\d+", result_short.stdout)


def test_cli_relative_directory(temp_project):
    result = run_cli([".", "-T", "-d", "1"], cwd=Path(temp_project))

    assert result.returncode == 0
    assert "package.json" in result.stdout
