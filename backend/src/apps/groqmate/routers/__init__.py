from .public.v1 import ChatRouter, VisionRouter, SpeechRouter, HealthRouter
