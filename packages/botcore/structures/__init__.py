from .base import Base
from .channels import (
    CategoryChannel,
    Channel,
    DMChannel,
    GuildChannel,
    NewsChannel,
    PartialGroupDMChannel,
    StageChannel,
    TextChannel,
    ThreadChannel,
    VoiceChannel,
)
from .entities import (
    ClientPresence,
    Guild,
    GuildEmoji,
    GuildMember,
    Message,
    MessageReaction,
    Presence,
    Role,
    StageInstance,
    ThreadMember,
    User,
    VoiceState,
)
from .interactions import (
    AutocompleteInteraction,
    BaseCommandInteraction,
    ButtonInteraction,
    CommandInteraction,
    ContextMenuInteraction,
    Interaction,
    MessageComponentInteraction,
    MessageContextMenuInteraction,
    ModalSubmitInteraction,
    SelectMenuInteraction,
    UserContextMenuInteraction,
)
