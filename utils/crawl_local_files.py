"""
Local Directory Crawler - Cross-platform compatible (Windows, macOS, Linux)
"""

import fnmatch
import logging
import os
from pathlib import Path

import pathspec

logger = logging.getLogger(__name__)


def _matches_any(patterns, *candidates):
    return any(
        fnmatch.fnmatch(candidate, pattern)
        for pattern in patterns
        for candidate in candidates
    )


def _load_gitignore(directory):
    gitignore_path = directory / ".gitignore"
    if not gitignore_path.exists():
        return None
    try:
        with open(gitignore_path, "r", encoding="utf-8-sig") as f:
            spec = pathspec.PathSpec.from_lines("gitwildmatch", f.readlines())
        logger.info("Loaded .gitignore patterns from %s", gitignore_path)
        return spec
    except Exception as e:
        logger.warning("Could not read or parse .gitignore file %s: %s", gitignore_path, e)
        return None


def crawl_local_files(
    directory,
    include_patterns=None,
    exclude_patterns=None,
    max_file_size=None,
    use_relative_paths=True,
):
    """
    Crawl files in a local directory with cross-platform support.

    Directories and files are visited in sorted order so the resulting file
    indices are stable from one run to the next.

    Args:
        directory (str): Path to local directory
        include_patterns (set): File patterns to include (e.g. {"*.py", "*.js"})
        exclude_patterns (set): File patterns to exclude (e.g. {"tests/*"})
        max_file_size (int): Maximum file size in bytes
        use_relative_paths (bool): Whether to use paths relative to directory

    Returns:
        dict: {"files": {filepath: content}}
    """
    directory = Path(directory).resolve()
    if not directory.is_dir():
        raise ValueError(f"Directory does not exist: {directory}")

    gitignore_spec = _load_gitignore(directory)
    files_dict = {}

    for root, dirs, files in os.walk(directory):
        root_path = Path(root)

        # Prune excluded directories before descending into them
        kept_dirs = []
        for d in sorted(dirs):
            dirpath_rel = (root_path / d).relative_to(directory).as_posix()
            if gitignore_spec and gitignore_spec.match_file(dirpath_rel + "/"):
                continue
            if exclude_patterns and _matches_any(exclude_patterns, dirpath_rel, d):
                continue
            kept_dirs.append(d)
        dirs[:] = kept_dirs

        for filename in sorted(files):
            filepath = root_path / filename
            relpath = filepath.relative_to(directory).as_posix()

            if gitignore_spec and gitignore_spec.match_file(relpath):
                logger.debug("%s [skipped (gitignore)]", relpath)
                continue
            if exclude_patterns and _matches_any(exclude_patterns, relpath):
                logger.debug("%s [skipped (excluded)]", relpath)
                continue
            if include_patterns and not _matches_any(include_patterns, relpath, filename):
                logger.debug("%s [skipped (not included)]", relpath)
                continue
            if max_file_size and filepath.stat().st_size > max_file_size:
                logger.debug("%s [skipped (size limit)]", relpath)
                continue

            try:
                with open(filepath, "r", encoding="utf-8-sig") as f:
                    content = f.read()
            except (OSError, UnicodeDecodeError) as e:
                logger.warning("Could not read file %s: %s", filepath, e)
                continue

            key = relpath if use_relative_paths else filepath.as_posix()
            files_dict[key] = content
            logger.debug("%s [processed]", relpath)

    return {"files": files_dict}
