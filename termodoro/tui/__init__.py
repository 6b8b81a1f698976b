"""Terminal user interface: messages, key maps, widgets, screens and the event loop."""