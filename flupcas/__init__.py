from ._errors import *
from ._response import *
from ._config import *
from ._events import *
from ._interpreter import *
from ._ticket import *
from ._sink import *
from ._casclient import *
