"""기본 CRUD 레포지토리 — 모든 레포지토리의 부모 클래스.

Base CRUD Repository — Parent class for domain repositories.
Provides generic Create, Read, Update, Delete operations. Mutations
report the number of affected rows so callers can judge the outcome.

Usage:
    class BrandRepository(BaseRepository[Brand]):
        def __init__(self) -> None:
            super().__init__(Brand)
"""

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import Select, delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base

# 제네릭 타입 변수 — SQLAlchemy 모델을 나타냄
# Generic type variable representing a SQLAlchemy model
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """제네릭 CRUD 레포지토리.

    Generic CRUD repository providing common database operations
    keyed by an integer primary key.

    Attributes:
        model: SQLAlchemy 모델 클래스 (The SQLAlchemy model class)
    """

    def __init__(self, model: type[ModelType]) -> None:
        """레포지토리를 초기화합니다.

        Initialize the repository with a model class.

        Args:
            model: 이 레포지토리가 관리할 SQLAlchemy 모델 클래스
                   (SQLAlchemy model class this repository manages)
        """
        self.model: type[ModelType] = model

    async def get_by_id(
        self,
        db: AsyncSession,
        record_id: int,
    ) -> ModelType | None:
        """ID로 단일 레코드를 조회합니다.

        Retrieve a single record by its primary key.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 조회할 레코드 ID (ID of the record to retrieve)

        Returns:
            ModelType | None: 조회된 레코드 또는 None (Found record or None)
        """
        query: Select = select(self.model).where(self.model.id == record_id)
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def get_all(
        self,
        db: AsyncSession,
        order_by: Any | None = None,
    ) -> Sequence[ModelType]:
        """모든 레코드를 조회합니다.

        Retrieve every record, optionally ordered.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            order_by: 정렬 기준 컬럼 (Column to order by)

        Returns:
            Sequence[ModelType]: 조회된 레코드 목록 (List of matching records)
        """
        query: Select = select(self.model)

        if order_by is not None:
            query = query.order_by(order_by)

        result = await db.execute(query)
        return result.scalars().all()

    async def create(
        self,
        db: AsyncSession,
        obj_data: dict[str, Any],
    ) -> ModelType:
        """새 레코드를 생성합니다.

        Create a new record in the database.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            obj_data: 생성할 레코드의 데이터 딕셔너리
                      (Dictionary of data for the new record)

        Returns:
            ModelType: 생성된 레코드 (The created record)
        """
        db_obj: ModelType = self.model(**obj_data)
        db.add(db_obj)
        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def update_by_id(
        self,
        db: AsyncSession,
        record_id: int,
        update_data: dict[str, Any],
    ) -> int:
        """ID로 레코드를 부분 업데이트합니다.

        Update the given columns of one record by primary key.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 업데이트할 레코드 ID (ID of the record to update)
            update_data: 업데이트할 필드와 값의 딕셔너리
                         (Dictionary of fields and values to update)

        Returns:
            int: 변경된 행 수 (Number of rows matched, 0 if absent)
        """
        values: dict[str, Any] = {
            field: value
            for field, value in update_data.items()
            if hasattr(self.model, field)
        }
        result = await db.execute(
            update(self.model).where(self.model.id == record_id).values(**values)
        )
        return result.rowcount

    async def update_many(
        self,
        db: AsyncSession,
        record_ids: list[int],
        update_data: dict[str, Any],
    ) -> int:
        """여러 레코드를 한 번에 업데이트합니다.

        Apply the same column values to every record whose ID is in the list.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_ids: 대상 레코드 ID 목록 (Target record IDs)
            update_data: 업데이트할 필드와 값 (Fields and values to set)

        Returns:
            int: 변경된 행 수 (Number of rows updated)
        """
        if not record_ids:
            return 0
        result = await db.execute(
            update(self.model)
            .where(self.model.id.in_(record_ids))
            .values(**update_data)
        )
        return result.rowcount

    async def delete_by_id(
        self,
        db: AsyncSession,
        record_id: int,
    ) -> int:
        """레코드를 삭제합니다.

        Delete a record by its primary key.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 삭제할 레코드 ID (ID of the record to delete)

        Returns:
            int: 삭제된 행 수 (Number of rows deleted, 0 or 1)
        """
        result = await db.execute(
            delete(self.model).where(self.model.id == record_id)
        )
        return result.rowcount

    async def delete_many(
        self,
        db: AsyncSession,
        record_ids: list[int],
    ) -> int:
        """여러 레코드를 한 번에 삭제합니다.

        Delete every record whose ID is in the list.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_ids: 삭제할 레코드 ID 목록 (IDs to delete)

        Returns:
            int: 삭제된 행 수 (Number of rows deleted)
        """
        if not record_ids:
            return 0
        result = await db.execute(
            delete(self.model).where(self.model.id.in_(record_ids))
        )
        return result.rowcount
