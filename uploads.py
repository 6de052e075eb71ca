import os
import time

from werkzeug.utils import secure_filename

ALLOWED_IMAGE_EXTENSIONS = {'jpg', 'jpeg', 'png', 'gif', 'svg', 'webp', 'ico'}


def is_allowed_image(filename):
    if not filename or '.' not in filename:
        return False
    return filename.rsplit('.', 1)[1].lower() in ALLOWED_IMAGE_EXTENSIONS


def save_upload(file_storage, upload_root, folder, prefix=''):
    """Store an uploaded image under ``upload_root/folder`` and return its public URL."""
    if not is_allowed_image(file_storage.filename):
        raise ValueError("Unsupported file type")

    name = secure_filename(file_storage.filename) or 'upload'
    filename = f"{prefix}{int(time.time() * 1000)}-{name}"

    target_dir = os.path.join(upload_root, folder)
    os.makedirs(target_dir, exist_ok=True)
    file_storage.save(os.path.join(target_dir, filename))
    return f"/uploads/{folder}/{filename}"


def save_first_upload(files, upload_root, folder, field=None):
    """Save the first non-empty file of a multipart request, or the one named ``field``."""
    for key, file_storage in files.items():
        if field and key != field:
            continue
        if file_storage and file_storage.filename:
            return save_upload(file_storage, upload_root, folder)
    return None
