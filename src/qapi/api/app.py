"""Application API (``/api/v2/app/*``)"""

from qapi.request import ApiRequest, JsonArguments, Method
from qapi.response import check_default_status, parse, text
from qapi.schemas import BuildInfo, Preferences

from .base import ApiBase


class AppAPI(ApiBase):
    async def get_version(self) -> str:
        """Application version, e.g. ``v4.1.3``"""
        response = await self.send_request(ApiRequest(Method.VERSION))
        check_default_status(response)
        return text(response)

    async def get_api_version(self) -> str:
        """Web API version, e.g. ``2.0``"""
        response = await self.send_request(ApiRequest(Method.WEBAPI_VERSION))
        check_default_status(response)
        return text(response)

    async def get_build_info(self) -> BuildInfo:
        response = await self.send_request(ApiRequest(Method.BUILD_INFO))
        check_default_status(response)
        return parse(response, BuildInfo)

    async def shutdown(self) -> None:
        """Shut the application down"""
        response = await self.send_request(ApiRequest(Method.SHUTDOWN))
        check_default_status(response)

    async def get_preferences(self) -> Preferences:
        response = await self.send_request(ApiRequest(Method.PREFERENCES))
        check_default_status(response)
        return parse(response, Preferences)

    async def set_preferences(self, values: Preferences) -> None:
        """Change the preferences that are set on ``values``; the rest stay as they are"""
        response = await self.send_request(ApiRequest(Method.SET_PREFERENCES, JsonArguments(values)))
        check_default_status(response)

    async def get_default_save_path(self) -> str:
        response = await self.send_request(ApiRequest(Method.DEFAULT_SAVE_PATH))
        check_default_status(response)
        return text(response)
