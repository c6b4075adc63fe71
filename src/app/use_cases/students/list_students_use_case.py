import math
from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import ListStudentsQuery, StudentPageDTO


class ListStudentsUseCase:
    """Use case for the searchable, paginated list of submitted records"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, query: ListStudentsQuery) -> Result[StudentPageDTO]:
        """
        List submitted NYSC records

        payment_status "paid" or "unpaid" filters on is_paid; anything else
        returns both. Unknown sort columns fall back to created_at.
        """
        is_paid = None
        if query.payment_status in ("paid", "unpaid"):
            is_paid = query.payment_status == "paid"

        sort_order = "asc" if query.sort_order.lower() == "asc" else "desc"

        async with self.uow:
            records, total = await self.uow.student_nysc.search_submitted(
                search=query.search,
                is_paid=is_paid,
                sort_by=query.sort_by,
                sort_order=sort_order,
                offset=(query.page - 1) * query.per_page,
                limit=query.per_page,
            )

        return Return.ok(
            StudentPageDTO(
                data=[record.model_dump() for record in records],
                total=total,
                current_page=query.page,
                per_page=query.per_page,
                last_page=max(1, math.ceil(total / query.per_page)),
            )
        )
