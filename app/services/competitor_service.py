import logging
from typing import Any, Dict, List, Mapping, Optional
from datetime import date

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, joinedload, selectinload

from app.core.config import settings
from app.core.exceptions import DuplicateError, NotFoundError, ValidationError
from app.core.security import get_password_hash
from app.models import catalog as catalog_model
from app.models import competitor as competitor_model
from app.models import enrollment as enrollment_model
from app.models import location as location_model
from app.models import tutor as tutor_model
from app.models import user as user_model
from app.schemas import competitor_schemas, enrollment_schemas
from app.services import rejection_reason_service

logger = logging.getLogger(__name__)

NOT_ASSIGNED = "Not assigned"
NOT_SPECIFIED = "Not specified"
DEFAULT_STATUS = "Pending"

def validate_competitor_data(data: Mapping[str, Any], today: Optional[date] = None) -> competitor_schemas.CompetitorCreate:
    """
    Validates raw applicant data and returns the parsed model.
    Only the first failing field is reported, as `Invalid data: <field>: <detail>`.
    """
    try:
        return competitor_schemas.CompetitorCreate.model_validate(data, context={"today": today})
    except PydanticValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"])
        detail = f"{field}: {error['msg']}" if field else error["msg"]
        raise ValidationError(f"Invalid data: {detail}")

def _get_competitor_by_user_id(db: Session, user_id: int) -> competitor_model.Competitor:
    competitor = db.query(competitor_model.Competitor).filter(competitor_model.Competitor.user_id == user_id).first()
    if not competitor:
        logger.warning("No competitor linked to user %s", user_id)
        raise NotFoundError("Competitor not found")
    return competitor

def _registration_exists(db: Session, email: str, national_id: str) -> bool:
    if db.query(user_model.User).filter(user_model.User.email == email).first():
        return True
    return db.query(competitor_model.Competitor)\
        .filter(competitor_model.Competitor.national_id == national_id)\
        .first() is not None

def register_competitor(db: Session, data: Mapping[str, Any], today: Optional[date] = None) -> competitor_schemas.RegistrationResult:
    competitor_in = validate_competitor_data(data, today=today)

    existing_user = db.query(user_model.User)\
        .outerjoin(competitor_model.Competitor, competitor_model.Competitor.user_id == user_model.User.id)\
        .filter(or_(
            user_model.User.email == competitor_in.email,
            competitor_model.Competitor.national_id == competitor_in.national_id,
        ))\
        .first()
    if existing_user:
        logger.warning("Rejected duplicate registration for user %s", existing_user.id)
        raise DuplicateError("A user or competitor with that email or national ID already exists")

    # The seed password is the national ID; credential rotation happens outside this service.
    password = competitor_in.national_id
    if settings.HASH_INITIAL_PASSWORD:
        password = get_password_hash(password)

    try:
        db_user = user_model.User(
            name=competitor_in.name,
            surname=competitor_in.surname,
            email=competitor_in.email,
            role_id=settings.COMPETITOR_ROLE_ID,
            password=password,
        )
        db.add(db_user)
        db.flush() # Assigns db_user.id without committing

        db_competitor = competitor_model.Competitor(
            user_id=db_user.id,
            national_id=competitor_in.national_id,
            birth_date=competitor_in.birth_date,
            school_id=competitor_in.school_id,
            province_id=competitor_in.province_id,
        )
        db.add(db_competitor)
        db.commit()
    except IntegrityError:
        db.rollback()
        # Unique constraints catch registrations that raced past the check above.
        # Any other constraint (e.g. an unknown school or province) is not a duplicate.
        if _registration_exists(db, competitor_in.email, competitor_in.national_id):
            logger.warning("Unique constraint rejected registration for %s", competitor_in.email)
            raise DuplicateError("A user or competitor with that email or national ID already exists")
        raise
    except SQLAlchemyError:
        db.rollback()
        raise

    competitor = db.query(competitor_model.Competitor)\
        .options(
            joinedload(competitor_model.Competitor.school),
            joinedload(competitor_model.Competitor.province).joinedload(location_model.Province.department),
            joinedload(competitor_model.Competitor.user),
        )\
        .filter(competitor_model.Competitor.id == db_competitor.id)\
        .one()
    logger.info("Registered competitor %s for user %s", competitor.id, competitor.user_id)

    return competitor_schemas.RegistrationResult(
        competitor=competitor_schemas.CompetitorRead.model_validate(competitor),
        credentials=competitor_schemas.Credentials(
            email=competitor_in.email,
            password=competitor_in.national_id,
        ),
    )

def get_competitor_submissions(db: Session, user_id: int) -> List[enrollment_schemas.SubmissionGroup]:
    competitor = _get_competitor_by_user_id(db, user_id)

    tutor_enrollments = db.query(tutor_model.TutorEnrollment)\
        .join(enrollment_model.Enrollment, tutor_model.TutorEnrollment.enrollment_id == enrollment_model.Enrollment.id)\
        .filter(enrollment_model.Enrollment.competitor_id == competitor.id)\
        .options(
            joinedload(tutor_model.TutorEnrollment.enrollment),
            joinedload(tutor_model.TutorEnrollment.tutor).joinedload(tutor_model.Tutor.user),
        )\
        .order_by(tutor_model.TutorEnrollment.id)\
        .all()

    # dict keeps first-seen order, so groups follow the order of their first tutor record
    grouped: Dict[int, enrollment_schemas.SubmissionGroup] = {}
    for item in tutor_enrollments:
        group = grouped.get(item.enrollment_id)
        if group is None:
            group = enrollment_schemas.SubmissionGroup(
                enrollment_id=item.enrollment_id,
                date=item.enrollment.enrollment_date,
                status=item.enrollment.status,
            )
            grouped[item.enrollment_id] = group

        tutor_user = item.tutor.user if item.tutor else None
        group.tutors.append(enrollment_schemas.TutorApproval(
            first_name=tutor_user.name if tutor_user else None,
            last_name=tutor_user.surname if tutor_user else None,
            approved=item.approved,
            approval_date=item.approval_date,
        ))

    return list(grouped.values())

def _find_rejection(tutor_enrollments: List[tutor_model.TutorEnrollment]) -> Optional[tutor_model.TutorEnrollment]:
    return next(
        (te for te in tutor_enrollments
         if not te.approved and (te.rejection_reason_id or te.rejection_description)),
        None,
    )

def _rejection_reason(tutor_enrollment: Optional[tutor_model.TutorEnrollment]) -> Optional[str]:
    if tutor_enrollment is None:
        return None
    reason_id = tutor_enrollment.rejection_reason_id
    if reason_id == rejection_reason_service.OTHER_REASON_ID:
        return rejection_reason_service.describe_rejection_reason(reason_id, tutor_enrollment.rejection_description)
    if reason_id:
        return rejection_reason_service.describe_rejection_reason(reason_id) \
            or rejection_reason_service.UNSPECIFIED_REASON_MESSAGE
    # A description without a reason id is not reported
    return None

def get_competitor_enrollments(db: Session, user_id: int) -> List[enrollment_schemas.EnrollmentView]:
    competitor = _get_competitor_by_user_id(db, user_id)

    enrollments = db.query(enrollment_model.Enrollment)\
        .filter(enrollment_model.Enrollment.competitor_id == competitor.id)\
        .options(
            joinedload(enrollment_model.Enrollment.area),
            joinedload(enrollment_model.Enrollment.category)
                .joinedload(catalog_model.Category.min_grade)
                .joinedload(catalog_model.Grade.level),
            joinedload(enrollment_model.Enrollment.call),
            selectinload(enrollment_model.Enrollment.tutor_enrollments),
        )\
        .order_by(enrollment_model.Enrollment.enrollment_date.desc())\
        .all()

    views = []
    for enrollment in enrollments:
        category = enrollment.category
        grade = category.min_grade if category else None
        level = grade.level if grade else None
        views.append(enrollment_schemas.EnrollmentView(
            id=enrollment.id,
            area=(enrollment.area.name if enrollment.area else None) or NOT_ASSIGNED,
            category=(category.name if category else None) or NOT_ASSIGNED,
            grade=(grade.name if grade else None) or NOT_SPECIFIED,
            level=(level.name if level else None) or NOT_SPECIFIED,
            call=(enrollment.call.name if enrollment.call else None) or NOT_ASSIGNED,
            enrollment_date=enrollment.enrollment_date,
            status=enrollment.status or DEFAULT_STATUS,
            status_date=enrollment.status_date,
            rejection_reason=_rejection_reason(_find_rejection(enrollment.tutor_enrollments)),
        ))
    return views
