"""Reset all resource counts use case."""

from pydantic import BaseModel

from oer.domain.service import ResourceService


class ResetCountsResponse(BaseModel):
    """Reset counts response."""

    message: str


class ResetCountsUseCase:
    """Use case for zeroing every resource count without deleting resources."""

    def __init__(self, resource_service: ResourceService) -> None:
        """Initialize reset counts use case.

        Args:
            resource_service: Resource domain service
        """
        self.resource_service = resource_service

    async def execute(self) -> ResetCountsResponse:
        """Execute reset flow."""
        await self.resource_service.reset_all_counts()
        return ResetCountsResponse(message="All OER counts reset to zero.")
