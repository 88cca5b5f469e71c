from netprobe.cli import netprobe

netprobe()
