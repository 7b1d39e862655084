from .channels import ChannelCache, PartialChannel
