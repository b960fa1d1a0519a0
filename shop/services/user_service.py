"""
User Service - Business Logic Layer
"""
from typing import List
from sqlalchemy.orm import Session

from shop.config import settings
from shop.exceptions import NotFoundError
from shop.repositories.user_repository import UserRepository
from shop.schemas.user import UserCreate, UserUpdate, UserResponse
from shop.services.security import hash_password


class UserService:
    """Service layer for user business logic"""
    
    def __init__(self, db: Session):
        self.repository = UserRepository(db)
    
    def get_all_users(self) -> List[UserResponse]:
        """Get all users"""
        return [UserResponse.model_validate(u) for u in self.repository.get_all()]
    
    def get_user_by_id(self, user_id: int) -> UserResponse:
        """Get user by ID"""
        user = self.repository.get_by_id(user_id)
        if not user:
            raise NotFoundError(f"User with id={user_id} not found")
        return UserResponse.model_validate(user)
    
    def create_user(self, user_data: UserCreate) -> UserResponse:
        """Register a user; the password is stored only as a hash"""
        user = self.repository.create({
            'name': user_data.name,
            'email': user_data.email,
            'password_hash': hash_password(user_data.password, rounds=settings.BCRYPT_ROUNDS)
        })
        return UserResponse.model_validate(user)
    
    def update_user(self, user_id: int, user_data: UserUpdate) -> UserResponse:
        """Update name, email and/or password"""
        update_data = user_data.model_dump(exclude_unset=True, exclude_none=True)
        password = update_data.pop('password', None)
        if password is not None:
            update_data['password_hash'] = hash_password(password, rounds=settings.BCRYPT_ROUNDS)
        
        user = self.repository.update(user_id, update_data)
        if not user:
            raise NotFoundError(f"User with id={user_id} not found")
        return UserResponse.model_validate(user)
    
    def delete_user(self, user_id: int) -> None:
        """Delete user"""
        if not self.repository.delete(user_id):
            raise NotFoundError(f"User with id={user_id} not found")
