from .base import Validator
from .types import *
from .dates import *
from .strings import *
from .values import *
