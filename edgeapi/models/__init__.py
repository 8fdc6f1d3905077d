"""Data models for images, commits, devices, groups, updates and FDO records."""