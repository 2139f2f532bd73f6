from .user import Profile, UserRole
from .response import SurveyResponse, SurveySubmission
from .settings import AppSettings
from .coaching import CoachingSession, SessionType, SessionStatus
from .observation import Observation
from .resource import CustomResource
from .strategy import SwotItem, StrategicGoal, StrategicResource
