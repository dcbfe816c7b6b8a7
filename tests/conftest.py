import datetime
from types import SimpleNamespace

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base
from app.models import (
    Area, Call, Category, Competitor, Department, Enrollment, Grade, Level,
    Province, Role, School, Tutor, TutorEnrollment, User,
)

@pytest.fixture
def db_session():
    # In-memory database shared across threads so TestClient requests see the same data
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()

@pytest.fixture
def seeded_db(db_session):
    db_session.add_all([
        Role(id=1, name="Admin"),
        Role(id=2, name="Competitor"),
        Role(id=3, name="Tutor"),
        Department(id=1, name="Cochabamba"),
        Province(id=1, name="Cercado", department_id=1),
        School(id=1, name="Colegio San Agustin"),
    ])
    db_session.commit()
    return db_session

@pytest.fixture
def birth_date_for_age():
    def _birth_date_for_age(age: int, today: datetime.date = None) -> datetime.date:
        """Birth date that makes someone exactly `age` years old on `today`."""
        today = today or datetime.date.today()
        try:
            return today.replace(year=today.year - age)
        except ValueError:
            # Today is Feb 29 and the target year is not a leap year
            return today.replace(year=today.year - age, day=28)
    return _birth_date_for_age

@pytest.fixture
def competitor_payload():
    return {
        "name": "Lucia",
        "surname": "Mamani",
        "email": "lucia.mamani@example.com",
        "national_id": "7845123",
        "birth_date": "2010-01-01",
        "school_id": 1,
        "province_id": 1,
    }

@pytest.fixture
def enrollment_factory(db_session):
    """Creates competitors, enrollments and tutor decisions directly in the store."""
    counter = {"user": 100}

    def _new_user(name, surname):
        counter["user"] += 1
        user = User(
            id=counter["user"], name=name, surname=surname,
            email=f"user{counter['user']}@example.com", role_id=2, password="x",
        )
        db_session.add(user)
        db_session.flush()
        return user

    def create_competitor(national_id="CI-0001"):
        user = _new_user("Mateo", "Quispe")
        competitor = Competitor(
            user_id=user.id, national_id=national_id,
            birth_date=datetime.date(2011, 3, 14), school_id=None, province_id=None,
        )
        db_session.add(competitor)
        db_session.commit()
        return competitor

    def create_tutor(name, surname):
        user = _new_user(name, surname)
        tutor = Tutor(user_id=user.id)
        db_session.add(tutor)
        db_session.commit()
        return tutor

    def create_enrollment(competitor, **fields):
        enrollment = Enrollment(competitor_id=competitor.id, **fields)
        db_session.add(enrollment)
        db_session.commit()
        return enrollment

    def add_decision(enrollment, tutor, **fields):
        decision = TutorEnrollment(enrollment_id=enrollment.id, tutor_id=tutor.id, **fields)
        db_session.add(decision)
        db_session.commit()
        return decision

    def create_category(category_name="Primero Primaria", grade_name="1ro Primaria", level_name="Primaria"):
        level = Level(name=level_name)
        grade = Grade(name=grade_name, level=level)
        category = Category(name=category_name, min_grade=grade)
        db_session.add(category)
        db_session.commit()
        return category

    def create_area(name="Matematicas"):
        area = Area(name=name)
        db_session.add(area)
        db_session.commit()
        return area

    def create_call(name="Olimpiada Oh! SanSi 2025"):
        call = Call(name=name)
        db_session.add(call)
        db_session.commit()
        return call

    return SimpleNamespace(
        competitor=create_competitor,
        tutor=create_tutor,
        enrollment=create_enrollment,
        decision=add_decision,
        category=create_category,
        area=create_area,
        call=create_call,
    )
