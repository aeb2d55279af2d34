"""Dictionary Installer: copies candidate dictionary files with per-file fault isolation."""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
import shutil
from typing import Iterable

from loguru import logger

from multispell.core.errors import InstallFailed
from multispell.core.types import Catalog, InstallOutcome, InstallStatus
from multispell.utils.helpers import dictionary_id_from_path, ensure_directory_exists


def install_file(file_path: str | Path, install_directory: Path) -> InstallOutcome:
    """Copy one candidate file into the installation directory under its own basename.

    Any failure is captured in the returned outcome instead of being raised.
    """
    source = Path(file_path)
    dictionary_id = dictionary_id_from_path(source)
    destination = install_directory / source.name

    try:
        ensure_directory_exists(install_directory)
        shutil.copyfile(source, destination)
    except OSError as e:
        failure = InstallFailed(dictionary_id, e)
        logger.warning(f"✗ {failure}")
        return InstallOutcome(dictionary_id, InstallStatus.FAILED, source, cause=failure)

    logger.info(f"✓ Installed {source.name} into {install_directory}")
    return InstallOutcome(dictionary_id, InstallStatus.INSTALLED, source)


def install_dictionaries(
    file_paths: Iterable[str | Path], catalog: Catalog, jobs: int = 1
) -> list[InstallOutcome]:
    """Install candidate files, returning one outcome per file in input order.

    Files are independent: a failed copy does not stop the rest of the batch
    and nothing already copied is rolled back. The affix and data halves of a
    dictionary are copied separately; pairing is checked by the catalog.

    Args:
        file_paths: Candidate ``.aff``/``.dic`` files
        catalog: Current catalog, providing the installation directory
        jobs: Number of parallel copy workers

    Returns:
        Outcomes in the order the candidates were supplied
    """
    file_paths = list(file_paths)
    install_directory = catalog.install_directory

    if jobs > 1 and len(file_paths) > 1:
        with ThreadPoolExecutor(max_workers=jobs) as executor:
            outcomes = list(
                executor.map(lambda path: install_file(path, install_directory), file_paths)
            )
    else:
        outcomes = [install_file(path, install_directory) for path in file_paths]

    failed = sum(1 for outcome in outcomes if not outcome.installed)
    if failed:
        logger.warning(f"⚠️  {failed} of {len(outcomes)} dictionary files failed to install")
    return outcomes
