"""Engine subpackage - core salary estimation logic."""
from .salary_engine import predict_salary, explain_salary
from .models import Profile, Breakdown, PredictionResult

__all__ = ['predict_salary', 'explain_salary', 'Profile', 'Breakdown', 'PredictionResult']
