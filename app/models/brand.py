"""브랜드 SQLAlchemy ORM 모델 정의.

Brand SQLAlchemy ORM model definition.

Tables:
    - brands: 상품 브랜드 (Product brand / manufacturer label)
"""

from sqlalchemy import BigInteger, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base

# SQLite는 INTEGER PRIMARY KEY만 자동 증가 — BIGINT 대신 INTEGER 사용
# SQLite only auto-increments INTEGER PRIMARY KEY columns
_BrandId = BigInteger().with_variant(Integer, "sqlite")


class Brand(Base):
    """브랜드 모델 — 상품 제조사/라벨.

    Brand model — A manufacturer or label that products are filed under.
    Visibility (show_status) and manufacturer (factory_status) are 0/1 flags
    that the admin console toggles in bulk.

    Attributes:
        id: 고유 식별자 (Auto-increment identifier)
        name: 브랜드 이름 (Brand name)
        first_letter: 이름 첫 글자, 색인용 (First letter of the name, for A-Z indexes)
        category: 브랜드 분류 (Free-form category label, optional)
        sort: 정렬 가중치, 클수록 앞 (Ordering weight, higher first)
        factory_status: 제조사 여부 0/1 (Whether the brand is a direct manufacturer)
        show_status: 노출 여부 0/1 (Whether the brand is shown)
        product_count: 상품 수 (Number of products under the brand)
        product_comment_count: 상품 댓글 수 (Number of product comments)
        logo: 로고 URL (Logo image URL)
        big_pic: 대표 이미지 URL (Banner image URL, optional)
        brand_story: 브랜드 스토리 (Brand story text, optional)
    """

    __tablename__ = "brands"

    # 브랜드 고유 식별자 — Brand identifier (auto-increment)
    id: Mapped[int] = mapped_column(_BrandId, primary_key=True, autoincrement=True)
    # 브랜드 이름 — Brand display name
    name: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    # 첫 글자 — First letter, derived from name when not supplied
    first_letter: Mapped[str | None] = mapped_column(String(8), nullable=True)
    # 분류 — Category label
    category: Mapped[str | None] = mapped_column(String(64), nullable=True)
    # 정렬 — Sort weight (listing order: sort DESC)
    sort: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    # 제조사 여부 — 0: no, 1: yes
    factory_status: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    # 노출 여부 — 0: hidden, 1: shown
    show_status: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    product_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    product_comment_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    # 로고 — Logo URL
    logo: Mapped[str | None] = mapped_column(String(255), nullable=True)
    # 대표 이미지 — Banner image URL
    big_pic: Mapped[str | None] = mapped_column(String(255), nullable=True)
    # 브랜드 스토리 — Long-form brand story
    brand_story: Mapped[str | None] = mapped_column(Text, nullable=True)
