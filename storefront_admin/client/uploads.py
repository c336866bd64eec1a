"""
图片上传API
"""
from typing import Sequence

import aiohttp

from ..utils.logger import get_logger
from .envelope import ApiResponse
from .executor import RequestExecutor, encode_path_segment
from .models import UploadFile

logger = get_logger("api.uploads")

UPLOAD_PATH = "/api/admin/upload"


def _build_form(field: str, files: Sequence[UploadFile]) -> aiohttp.FormData:
    form = aiohttp.FormData()
    for file in files:
        form.add_field(field, file.content, filename=file.filename, content_type=file.content_type)
    return form


class UploadAPI:
    """图片上传相关操作"""

    def __init__(self, executor: RequestExecutor):
        self.executor = executor

    async def upload_image(self, file: UploadFile) -> ApiResponse:
        """上传单张图片，返回图片记录"""
        logger.info(f"上传图片: {file.filename} ({len(file.content)} bytes)")
        return await self.executor.request(
            "POST", f"{UPLOAD_PATH}/image", form=_build_form("image", [file])
        )

    async def upload_images(self, files: Sequence[UploadFile]) -> ApiResponse:
        """批量上传图片，返回 {images, urls}"""
        if not files:
            return ApiResponse.failure("No files to upload", error_code="no_files")

        logger.info(f"批量上传图片: {len(files)} 个文件")
        return await self.executor.request(
            "POST", f"{UPLOAD_PATH}/images", form=_build_form("images", files)
        )

    async def delete_image(self, public_id: str) -> ApiResponse:
        """删除图片，public_id 可能包含 / 等字符"""
        return await self.executor.request(
            "DELETE", f"{UPLOAD_PATH}/image/{encode_path_segment(public_id)}"
        )
