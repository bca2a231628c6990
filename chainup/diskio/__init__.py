"""Disk IO executors for unpacking many files quickly."""