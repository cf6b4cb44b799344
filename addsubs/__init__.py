"""
addsubs: bulk-add subtitle tracks to video files with mkvmerge.

The package pairs the video and subtitle files of one directory by sorted
filename, asks the operator to confirm the pairing, and then multiplexes
every pair concurrently into `<directory>/output/`.
"""
