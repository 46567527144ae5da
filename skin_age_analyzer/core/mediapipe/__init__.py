"""MediaPipe face landmark detection module"""

from .face_detector import FaceDetector, load_image

__all__ = ['FaceDetector', 'load_image']
