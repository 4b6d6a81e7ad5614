"""Service layer: turns raw tokens into configuration items.

All public service methods return :class:`~resolvctl.services.result.ServiceResult`.
"""
