from doomfire.runtime.display import FireWindow as FireWindow
from doomfire.runtime.event_handler import FireEventHandler as FireEventHandler
from doomfire.runtime.fire_loop import FireLoop as FireLoop
from doomfire.runtime.frame_pacer import FramePacer as FramePacer
