"""
Static asset serving for the prebuilt frontend.
"""
import logging
import os

from fastapi.staticfiles import StaticFiles

logger = logging.getLogger(__name__)


class AssetFiles(StaticFiles):
    """StaticFiles that answers 404 instead of failing when the asset root is missing.

    Starlette raises RuntimeError on the first request if the directory does
    not exist. The frontend build may simply not have been run yet, so we log
    once and let lookups miss.
    """

    def __init__(self, directory: str, html: bool = True):
        super().__init__(directory=directory, html=html, check_dir=False)

    async def check_config(self) -> None:
        if self.directory is not None and not os.path.isdir(self.directory):
            logger.warning(
                "Asset root %s does not exist; static requests will return 404",
                os.path.abspath(self.directory),
            )
            return
        await super().check_config()
