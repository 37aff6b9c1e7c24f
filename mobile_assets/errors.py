from __future__ import annotations


class AssetError(Exception):
    pass


class MissingSourceAsset(AssetError):
    def __init__(self, *paths: object) -> None:
        self.paths = paths
        names = ", ".join(str(p) for p in paths)
        super().__init__(f"No master asset found (looked for {names})")


class TransformFailure(AssetError):
    def __init__(self, name: str, cause: BaseException | str) -> None:
        self.name = name
        self.cause = cause
        super().__init__(f"{name}: {cause}")


class DirectoryCreationFailure(AssetError):
    def __init__(self, directory: object, cause: BaseException) -> None:
        self.directory = directory
        self.cause = cause
        super().__init__(f"Could not create {directory}: {cause}")
