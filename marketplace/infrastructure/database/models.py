# marketplace/infrastructure/database/models.py

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Numeric,
    String,
    Text,
    Time,
    UniqueConstraint,
)

from marketplace.infrastructure.database.session import Base


class AccountRow(Base):
    """Account role and seller sub-state. seller_status is the compare-and-set column."""

    __tablename__ = "accounts"

    account_id = Column(String, primary_key=True)
    email = Column(String, nullable=False)
    role = Column(String, nullable=False, default="customer")
    seller_status = Column(String, nullable=False, default="none", index=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    seller_applied_at = Column(DateTime(timezone=True), nullable=True)
    seller_approved_at = Column(DateTime(timezone=True), nullable=True)
    seller_denied_at = Column(DateTime(timezone=True), nullable=True)
    can_reapply_at = Column(DateTime(timezone=True), nullable=True)


class SellerApplicationRow(Base):
    __tablename__ = "seller_applications"

    application_id = Column(String, primary_key=True)
    account_id = Column(String, ForeignKey("accounts.account_id"), nullable=False, index=True)
    business_name = Column(String, nullable=False)
    business_type = Column(String, nullable=False)
    contact_email = Column(String, nullable=False)
    contact_phone = Column(String, nullable=True)
    website_url = Column(String, nullable=True)
    description = Column(Text, nullable=True)
    status = Column(String, nullable=False, default="pending", index=True)
    applied_at = Column(DateTime(timezone=True), nullable=False)
    decided_at = Column(DateTime(timezone=True), nullable=True)
    decided_by = Column(String, nullable=True)
    admin_notes = Column(Text, nullable=True)


class EventSubmissionRow(Base):
    """Seller-proposed event. status is the compare-and-set column."""

    __tablename__ = "event_submissions"

    submission_id = Column(String, primary_key=True)
    seller_id = Column(String, ForeignKey("accounts.account_id"), nullable=False, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    date = Column(Date, nullable=False)
    time = Column(Time, nullable=False)
    venue = Column(String, nullable=False)
    ticket_price = Column(Numeric(10, 2), nullable=False)
    organizer_email = Column(String, nullable=False)
    image_url = Column(String, nullable=True)
    status = Column(String, nullable=False, default="pending", index=True)
    submitted_at = Column(DateTime(timezone=True), nullable=False)
    decided_at = Column(DateTime(timezone=True), nullable=True)
    decided_by = Column(String, nullable=True)
    admin_feedback = Column(Text, nullable=True)
    slug = Column(String, nullable=True)


class EventRow(Base):
    """Published event. One per approved submission; slug is the public URL segment."""

    __tablename__ = "events"
    __table_args__ = (
        UniqueConstraint("slug", name="uq_events_slug"),
        UniqueConstraint("source_submission_id", name="uq_events_source_submission"),
    )

    event_id = Column(String, primary_key=True)
    source_submission_id = Column(
        String, ForeignKey("event_submissions.submission_id"), nullable=False
    )
    seller_id = Column(String, ForeignKey("accounts.account_id"), nullable=False, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    date = Column(Date, nullable=False)
    time = Column(Time, nullable=False)
    venue = Column(String, nullable=False)
    ticket_price = Column(Numeric(10, 2), nullable=False)
    organizer_email = Column(String, nullable=False)
    image_url = Column(String, nullable=True)
    slug = Column(String, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
