import argparse
import pathlib
import sys
from typing import List, Optional

from loguru import logger

from drive import (
    CredentialLoader,
    DriveUploadError,
    GoogleDriveClient,
    RemoteRejectedError,
    SourceFileNotFoundError,
)

from .settings import Settings


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.upper())


def upload(
    folder_id: str,
    file_path: str,
    settings: Optional[Settings] = None,
    loader: Optional[CredentialLoader] = None,
) -> str:
    """Upload file_path into the Drive folder folder_id and return the new file ID."""
    if not pathlib.Path(file_path).is_file():
        raise SourceFileNotFoundError(f"Unable to read file to upload: {file_path}")

    settings = settings or Settings.from_env()
    loader = loader or CredentialLoader(settings)

    client = GoogleDriveClient(loader.load(), settings)
    file_id = client.folder(folder_id).upload_file(file_path)
    print(f"File ID: {file_id}, is now located in folder w/ id: {folder_id}")
    return file_id


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="drive-upload",
        description="Upload a file to a Google Drive folder.",
    )
    parser.add_argument("file_path", help="path of the local file to upload")
    parser.add_argument("folder_id", help="ID of the destination Drive folder (quote it)")
    return parser


def run(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings.from_env()
    configure_logging(settings.log_level)

    try:
        upload(args.folder_id, args.file_path, settings=settings)
    except RemoteRejectedError as e:
        # the client already logged the provider detail
        logger.debug(f"[{e.kind.value}] {e}")
        return 1
    except DriveUploadError as e:
        logger.error(f"[{e.kind.value}] {e}")
        return 1
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
