"""
User Repository - Data Access Layer
"""
import logging
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from shop.exceptions import ConflictError, PersistenceError
from shop.models.user import User

logger = logging.getLogger(__name__)


class UserRepository:
    """Repository for User CRUD operations"""
    
    def __init__(self, db: Session):
        self.db = db
    
    def get_all(self) -> List[User]:
        """Get all users"""
        return self.db.query(User).order_by(User.id).all()
    
    def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID"""
        return self.db.query(User).filter(User.id == user_id).first()
    
    def get_by_email(self, email: str) -> Optional[User]:
        """Get the single user registered under an email"""
        return self.db.query(User).filter(User.email == email).first()
    
    def create(self, user_data: dict) -> User:
        """
        Create new user
        
        Args:
            user_data: Dictionary with name, email and password_hash
        
        Returns:
            Created user
        
        Raises:
            ConflictError: If the email is already registered
        """
        user = User(**user_data)
        self.db.add(user)
        self._commit(f"Email {user_data.get('email')} is already registered")
        self.db.refresh(user)
        return user
    
    def update(self, user_id: int, update_data: dict) -> Optional[User]:
        """Update only the provided fields of an existing user"""
        user = self.get_by_id(user_id)
        if not user:
            return None
        
        for field, value in update_data.items():
            setattr(user, field, value)
        
        self._commit(f"Email {update_data.get('email')} is already registered")
        self.db.refresh(user)
        return user
    
    def delete(self, user_id: int) -> bool:
        """Delete user"""
        user = self.get_by_id(user_id)
        if not user:
            return False
        
        self.db.delete(user)
        self._commit(f"User {user_id} still owns orders")
        return True
    
    def _commit(self, conflict_message: str) -> None:
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.info("User write rejected: %s", e.orig)
            raise ConflictError(conflict_message) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("User write failed: %s", e)
            raise PersistenceError(f"Could not save user: {e}") from e
