"""
User API endpoints
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List

from shop.api.deps import get_current_claims
from shop.database import get_db
from shop.exceptions import ConflictError, NotFoundError
from shop.services.user_service import UserService
from shop.schemas.user import UserCreate, UserUpdate, UserResponse

router = APIRouter(prefix="/users", tags=["users"])


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    """Dependency to get UserService instance"""
    return UserService(db)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED, summary="Register user")
def create_user(
    user_data: UserCreate,
    service: UserService = Depends(get_user_service)
):
    """
    Register a new user
    
    - **name**: Display name (required)
    - **email**: Email address (required, unique)
    - **password**: Password (required, 6-72 characters)
    """
    try:
        return service.create_user(user_data)
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.get("", response_model=List[UserResponse], summary="Get all users",
            dependencies=[Depends(get_current_claims)])
def get_users(service: UserService = Depends(get_user_service)):
    """Retrieve all users"""
    return service.get_all_users()


@router.get("/{user_id}", response_model=UserResponse, summary="Get user by ID",
            dependencies=[Depends(get_current_claims)])
def get_user(
    user_id: int,
    service: UserService = Depends(get_user_service)
):
    """
    Retrieve a specific user by ID
    
    - **user_id**: User ID
    """
    try:
        return service.get_user_by_id(user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.put("/{user_id}", response_model=UserResponse, summary="Update user",
            dependencies=[Depends(get_current_claims)])
def update_user(
    user_id: int,
    user_data: UserUpdate,
    service: UserService = Depends(get_user_service)
):
    """
    Update an existing user
    
    All fields are optional. A new password is re-hashed before storage.
    """
    try:
        return service.update_user(user_id, user_data)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete user",
               dependencies=[Depends(get_current_claims)])
def delete_user(
    user_id: int,
    service: UserService = Depends(get_user_service)
):
    """
    Delete a user
    
    Users who own orders cannot be deleted.
    """
    try:
        service.delete_user(user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return None
