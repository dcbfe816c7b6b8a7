from sqlalchemy.exc import SQLAlchemyError
from app.core.database import SessionLocal

def get_db():
    db = SessionLocal()
    try:
        yield db
    except SQLAlchemyError:
        # Leave no half-finished transaction on the connection returned to the pool
        db.rollback()
        raise
    finally:
        db.close()
