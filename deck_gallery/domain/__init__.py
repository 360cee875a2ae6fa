"""Domain objects for presentations and their slides."""

from .presentation import Presentation, PresentationFramework, PrivacyMode
from .slide import Slide

__all__ = ['Presentation', 'PresentationFramework', 'PrivacyMode', 'Slide']
