"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
Create schemas carry the required fields, Update schemas make every
field optional (only the fields a client sends are written). Columns that
are NOT NULL in the database reject an explicit null with a 422.
"""

from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional, List
from datetime import datetime
from enum import Enum


# ============================================================
# ENUMS
# ============================================================

class UserRole(str, Enum):
    student = "student"
    admin = "admin"


class OpportunityType(str, Enum):
    internship = "internship"
    job = "job"


class ApplicationStatus(str, Enum):
    pending = "pending"
    reviewed = "reviewed"
    accepted = "accepted"
    rejected = "rejected"
    withdrawn = "withdrawn"


class GoalStatus(str, Enum):
    not_started = "not-started"
    in_progress = "in-progress"
    completed = "completed"


class ModuleStatus(str, Enum):
    planned = "planned"
    in_progress = "in-progress"
    completed = "completed"


def reject_null(value):
    """Update fields may be omitted but not sent as null."""
    if value is None:
        raise ValueError("may not be null")
    return value


# ============================================================
# AUTH SCHEMAS
# ============================================================

class RegisterRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6)
    name: str = Field(..., min_length=1, max_length=200)
    year_level: Optional[int] = Field(None, ge=1, le=6)
    course: str = "Computer Engineering"

class LoginRequest(BaseModel):
    email: EmailStr
    password: str

class UserResponse(BaseModel):
    id: int
    email: str
    name: str
    role: str
    year_level: Optional[int] = None
    course: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: datetime

class AuthResponse(BaseModel):
    user: UserResponse


# ============================================================
# CAREER SCHEMAS
# ============================================================

class CareerCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    industry: Optional[str] = None
    required_skills: List[str] = []
    salary_range: Optional[str] = None
    growth_outlook: Optional[str] = None

class CareerUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    industry: Optional[str] = None
    required_skills: Optional[List[str]] = None
    salary_range: Optional[str] = None
    growth_outlook: Optional[str] = None

    @field_validator("title")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)

class CareerResponse(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    industry: Optional[str] = None
    required_skills: List[str] = []
    salary_range: Optional[str] = None
    growth_outlook: Optional[str] = None
    created_at: datetime


# ============================================================
# OPPORTUNITY SCHEMAS
# ============================================================

class OpportunityCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    company: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    type: OpportunityType = OpportunityType.internship
    location: Optional[str] = None
    industry: Optional[str] = None
    application_url: Optional[str] = None
    deadline: Optional[datetime] = None
    required_skills: List[str] = []
    is_active: bool = True

class OpportunityUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    company: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    type: Optional[OpportunityType] = None
    location: Optional[str] = None
    industry: Optional[str] = None
    application_url: Optional[str] = None
    deadline: Optional[datetime] = None
    required_skills: Optional[List[str]] = None
    is_active: Optional[bool] = None

    @field_validator("title", "company", "type", "is_active")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)

class OpportunityResponse(BaseModel):
    id: int
    title: str
    company: str
    description: Optional[str] = None
    type: str
    location: Optional[str] = None
    industry: Optional[str] = None
    application_url: Optional[str] = None
    deadline: Optional[datetime] = None
    required_skills: List[str] = []
    is_active: bool
    created_at: datetime

class SavedOpportunityResponse(BaseModel):
    id: int
    user_id: int
    opportunity_id: int
    saved_at: datetime


# ============================================================
# APPLICATION SCHEMAS
# ============================================================

class ApplicationCreate(BaseModel):
    profile_picture_url: Optional[str] = None
    resume_url: Optional[str] = None
    cover_letter: Optional[str] = None

class ApplicationUpdate(BaseModel):
    profile_picture_url: Optional[str] = None
    resume_url: Optional[str] = None
    cover_letter: Optional[str] = None

class ApplicationStatusUpdate(BaseModel):
    status: ApplicationStatus

class ApplicationResponse(BaseModel):
    id: int
    user_id: int
    opportunity_id: int
    profile_picture_url: Optional[str] = None
    resume_url: Optional[str] = None
    cover_letter: Optional[str] = None
    status: str
    applied_at: datetime
    updated_at: datetime

class ApplicationWithOpportunity(ApplicationResponse):
    opportunity: OpportunityResponse

class ApplicantResponse(ApplicationResponse):
    applicant_name: str
    applicant_email: str


# ============================================================
# RESOURCE SCHEMAS
# ============================================================

class ResourceCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    category: Optional[str] = None
    type: Optional[str] = None
    url: Optional[str] = None

class ResourceUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    category: Optional[str] = None
    type: Optional[str] = None
    url: Optional[str] = None

    @field_validator("title")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)

class ResourceResponse(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    category: Optional[str] = None
    type: Optional[str] = None
    url: Optional[str] = None
    download_count: int
    created_at: datetime


# ============================================================
# TRAINING PROGRAM SCHEMAS
# ============================================================

class TrainingProgramCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    provider: Optional[str] = None
    description: Optional[str] = None
    duration: Optional[str] = None
    format: Optional[str] = None
    url: Optional[str] = None
    skills: List[str] = []
    is_active: bool = True
    start_date: Optional[datetime] = None

class TrainingProgramUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    provider: Optional[str] = None
    description: Optional[str] = None
    duration: Optional[str] = None
    format: Optional[str] = None
    url: Optional[str] = None
    skills: Optional[List[str]] = None
    is_active: Optional[bool] = None
    start_date: Optional[datetime] = None

    @field_validator("title", "is_active")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)

class TrainingProgramResponse(BaseModel):
    id: int
    title: str
    provider: Optional[str] = None
    description: Optional[str] = None
    duration: Optional[str] = None
    format: Optional[str] = None
    url: Optional[str] = None
    skills: List[str] = []
    is_active: bool
    start_date: Optional[datetime] = None
    created_at: datetime


# ============================================================
# ACADEMIC MODULE SCHEMAS
# ============================================================

class AcademicModuleCreate(BaseModel):
    code: Optional[str] = None
    name: str = Field(..., min_length=1, max_length=200)
    semester: Optional[str] = None
    year_level: Optional[int] = Field(None, ge=1, le=6)
    credits: Optional[float] = Field(None, ge=0)
    grade: Optional[str] = None
    status: ModuleStatus = ModuleStatus.in_progress

class AcademicModuleUpdate(BaseModel):
    code: Optional[str] = None
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    semester: Optional[str] = None
    year_level: Optional[int] = Field(None, ge=1, le=6)
    credits: Optional[float] = Field(None, ge=0)
    grade: Optional[str] = None
    status: Optional[ModuleStatus] = None

    @field_validator("name", "status")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)

class AcademicModuleResponse(BaseModel):
    id: int
    user_id: int
    code: Optional[str] = None
    name: str
    semester: Optional[str] = None
    year_level: Optional[int] = None
    credits: Optional[float] = None
    grade: Optional[str] = None
    status: str


# ============================================================
# GOAL SCHEMAS
# ============================================================

class GoalCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    category: Optional[str] = None
    status: GoalStatus = GoalStatus.not_started
    progress: int = Field(0, ge=0, le=100)
    target_date: Optional[datetime] = None

class GoalUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    category: Optional[str] = None
    status: Optional[GoalStatus] = None
    progress: Optional[int] = Field(None, ge=0, le=100)
    target_date: Optional[datetime] = None

    @field_validator("title", "status", "progress")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)

class GoalResponse(BaseModel):
    id: int
    user_id: int
    title: str
    description: Optional[str] = None
    category: Optional[str] = None
    status: str
    progress: int
    target_date: Optional[datetime] = None
    created_at: datetime


# ============================================================
# PROFILE & PROGRESS SCHEMAS
# ============================================================

class ProfileUpsert(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    bio: Optional[str] = None
    phone: Optional[str] = None
    gpa: Optional[float] = Field(None, ge=0)
    skills: Optional[List[str]] = None
    interests: Optional[List[str]] = None
    career_goals: Optional[str] = None
    linkedin_url: Optional[str] = None
    github_url: Optional[str] = None
    portfolio_url: Optional[str] = None

class ProfileResponse(BaseModel):
    id: int
    user_id: int
    bio: Optional[str] = None
    phone: Optional[str] = None
    gpa: Optional[float] = None
    skills: List[str] = []
    interests: List[str] = []
    career_goals: Optional[str] = None
    linkedin_url: Optional[str] = None
    github_url: Optional[str] = None
    portfolio_url: Optional[str] = None
    updated_at: datetime

class SkillLevelUpdate(BaseModel):
    level: int = Field(..., ge=0, le=100)

class SkillLevelResponse(BaseModel):
    skill_name: str
    level: int

class ProgressRecordResponse(BaseModel):
    id: int
    user_id: int
    skill_name: str
    level: int
    recorded_at: datetime


# ============================================================
# DASHBOARD & ANALYTICS SCHEMAS
# ============================================================

class AdminStatsResponse(BaseModel):
    total_students: int
    total_careers: int
    total_opportunities: int
    total_resources: int

class StudentStatsResponse(BaseModel):
    total_goals: int
    completed_goals: int
    saved_opportunities: int
    applications: int
    skills_tracked: int
    average_skill_level: float

class RankingResponse(BaseModel):
    rank: int
    total_students: int
    score: float
    percentile: float

class StudentAnalyticsStats(BaseModel):
    total_goals: int
    completed_goals: int
    in_progress_goals: int
    total_skills: int
    average_skill_level: float

class StudentAnalyticsResponse(BaseModel):
    user: UserResponse
    profile: Optional[ProfileResponse] = None
    goals: List[GoalResponse] = []
    progress_records: List[ProgressRecordResponse] = []
    stats: StudentAnalyticsStats

class StudentSummary(BaseModel):
    name: str
    email: str
    year_level: Optional[int] = None
    course: Optional[str] = None
    avatar_url: Optional[str] = None

class StudentProfileResponse(BaseModel):
    """Profile fields (absent when no profile exists yet) plus the account summary."""
    id: Optional[int] = None
    user_id: Optional[int] = None
    bio: Optional[str] = None
    phone: Optional[str] = None
    gpa: Optional[float] = None
    skills: List[str] = []
    interests: List[str] = []
    career_goals: Optional[str] = None
    linkedin_url: Optional[str] = None
    github_url: Optional[str] = None
    portfolio_url: Optional[str] = None
    updated_at: Optional[datetime] = None
    user: StudentSummary


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class MessageResponse(BaseModel):
    message: str
    success: bool = True

class SuccessResponse(BaseModel):
    success: bool = True

class HealthResponse(BaseModel):
    status: str
    database: str
