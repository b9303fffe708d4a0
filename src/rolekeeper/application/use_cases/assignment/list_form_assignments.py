"""Project-wide summary of form assignments."""

import asyncio

from rolekeeper.application.dto.query_options import EXTENDED
from rolekeeper.application.ports import Authorizer
from rolekeeper.application.services import Resolver, gather_or_fail
from rolekeeper.domain.entities import Actor, Assignment, Project
from rolekeeper.domain.value_objects import Capability


def _actors(assignments: list[Assignment]) -> list[Actor]:
    return [a.actor for a in assignments if a.actor is not None]


class ListFormAssignmentsUseCase:
    """Read-only summary of who holds which role on every form in a project.

    Authorization is checked once, as assignment.list on the project, rather
    than per form.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        authorizer: Authorizer,
        timeout: float | None = None,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._authorizer = authorizer
        self._resolver = Resolver(unit_of_work_factory)
        self._timeout = timeout

    async def _authorized_project(self, actor_id: str, project_id: int) -> Project:
        project = await self._resolver.project(project_id)
        await self._authorizer.can_or_reject(
            actor_id, Capability.ASSIGNMENT_LIST, project
        )
        return project

    async def execute(
        self, actor_id: str, project_id: int
    ) -> dict[str, dict[int, list[Actor]]]:
        """Map xml_form_id -> role id -> actors. Forms with no assignments map to {}."""
        async with asyncio.timeout(self._timeout):
            project = await self._authorized_project(actor_id, project_id)
            async with self._uow_factory() as uow:
                by_form = await uow.assignments.list_for_forms_in_project(
                    project.id, EXTENDED
                )

        summary: dict[str, dict[int, list[Actor]]] = {}
        for xml_form_id, assignments in by_form.items():
            roles = summary.setdefault(xml_form_id, {})
            for assignment in assignments:
                if assignment.actor is not None:
                    roles.setdefault(assignment.role_id, []).append(assignment.actor)
        return summary

    async def execute_for_role(
        self, actor_id: str, project_id: int, role_ref: str
    ) -> dict[str, list[Actor]]:
        """Map xml_form_id -> actors holding the given role on that form."""
        async with asyncio.timeout(self._timeout):
            project, role = await gather_or_fail(
                self._authorized_project(actor_id, project_id),
                self._resolver.role(role_ref),
            )
            async with self._uow_factory() as uow:
                by_form = await uow.assignments.list_for_forms_in_project(
                    project.id, EXTENDED, role_id=role.id
                )
        return {xml_form_id: _actors(assignments) for xml_form_id, assignments in by_form.items()}
