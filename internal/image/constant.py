MSG_NO_FILE = "No file provided!"
MSG_FILE_STORED = "File stored"
MSG_IMAGE_NOT_FOUND = "Image not found."
