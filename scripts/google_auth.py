from drive import CredentialLoader, DriveUploadError
from uploader.settings import Settings


def main():
    settings = Settings.from_env()
    try:
        # opens a browser and a local listener unless a usable token is cached
        CredentialLoader(settings).load()
    except DriveUploadError as e:
        raise SystemExit(f"Authorization failed: {e}")
    print(f"Token ready: {settings.token_path}")


if __name__ == "__main__":
    main()
