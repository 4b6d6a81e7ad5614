"""BaseService: shared foundation for resolvctl services.

Every service receives the :class:`ResolvConf` it operates on at
construction time. Admission failures raised by the domain are caught
here and reported as failed ServiceResults.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from resolvctl.domain.errors import ConfError
from resolvctl.services.result import ServiceResult

if TYPE_CHECKING:
    from resolvctl.domain.conf import ResolvConf
    from resolvctl.domain.items import ConfItem

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes operating on one configuration.

    Usage::

        class BuildService(BaseService):
            def add_nameserver(self, address: str) -> ServiceResult:
                return self._admit("add_nameserver", new_nameserver(address))
    """

    def __init__(self, conf: ResolvConf) -> None:
        self._conf = conf

    @property
    def conf(self) -> ResolvConf:
        return self._conf

    def _admit(self, op: str, item: ConfItem) -> ServiceResult:
        """Add *item* to the configuration, converting rejections."""
        try:
            self._conf.add(item)
        except ConfError as exc:
            logger.debug("%s rejected: %s", op, exc)
            return ServiceResult.failure(op, exc.code, str(exc), entry=item.render())
        return ServiceResult(
            ok=True,
            op=op,
            data={"entry": item.render()},
        )
