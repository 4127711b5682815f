"""
Routing Configuration
Host property names and io types for the routing menus.
"""

# Axis selectors accepted as the first startup argument
MIDI_INPUTS = "midi_inputs"
MIDI_OUTPUTS = "midi_outputs"
AUDIO_INPUTS = "audio_inputs"
AUDIO_OUTPUTS = "audio_outputs"
IO_TYPES = (MIDI_INPUTS, MIDI_OUTPUTS, AUDIO_INPUTS, AUDIO_OUTPUTS)

# Host object model paths & properties
DEVICE_PATH_ALIAS = "this_device"
PROP_AVAILABLE_TYPES = "available_routing_types"
PROP_AVAILABLE_CHANNELS = "available_routing_channels"
PROP_ROUTING_TYPE = "routing_type"
PROP_ROUTING_CHANNEL = "routing_channel"
PROP_HAS_MIDI_INPUT = "has_midi_input"
PROP_TRACK_INPUT_TYPES = "available_input_routing_types"

# Label shown in a menu with nothing to choose
PLACEHOLDER_LABEL = "-"

# Startup usage hint (script name is prepended)
USAGE = "ioType (i.e. midi_inputs) [channelOffset]"
