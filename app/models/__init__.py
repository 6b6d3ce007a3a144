from app.models.conversation import Conversation
from app.models.message import Message
from app.models.profile import Profile
from app.models.reward import Reward
from app.models.style_pack import StylePack, UserStylePack

__all__ = [
    "Conversation",
    "Message",
    "Profile",
    "Reward",
    "StylePack",
    "UserStylePack",
]
