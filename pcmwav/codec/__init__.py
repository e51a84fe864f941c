"""WAV loading and saving."""
from pcmwav.codec.loader import Loader, load, preload
from pcmwav.codec.saver import Saver, save
from pcmwav.codec.validation import SaveInfoValidator

__all__ = ["Loader", "Saver", "SaveInfoValidator", "preload", "load", "save"]
