# apps/domain/services/menu_group_service.py

"""
Menu Group Service - Registers menu categories
"""

import logging
from typing import List
from uuid import uuid4

from apps.domain.models import InvalidNameError, MenuGroup
from apps.domain.ports.repositories import IMenuGroupRepository

logger = logging.getLogger(__name__)


class MenuGroupService:
    """Menu group service"""

    def __init__(self, menu_group_repo: IMenuGroupRepository):
        self._menu_group_repo = menu_group_repo

    def create(self, request: MenuGroup) -> MenuGroup:
        """
        Register a new menu group

        Args:
            request: Candidate menu group with a name

        Returns:
            Persisted menu group with a generated id

        Raises:
            InvalidNameError: If name is missing or empty
        """
        name = request.name
        if not name:
            raise InvalidNameError("Menu group name is required")

        menu_group = self._menu_group_repo.save(MenuGroup(id=uuid4(), name=name))
        logger.info(f"Created menu group {menu_group.id}")

        return menu_group

    def find_all(self) -> List[MenuGroup]:
        return self._menu_group_repo.find_all()
