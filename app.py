from flask import Flask, jsonify, request, render_template, send_from_directory
import os
import time
from datetime import timedelta
from functools import wraps

# Database and models
from models import (db, Project, Content, FaqItem, Window, ContactLink, Background, SiteSetting, SITE_CONFIG_KEY,
                    PROJECT_CATEGORIES, WINDOW_TYPES, WINDOW_LAYOUTS, BACKGROUND_MODES, BACKGROUND_TYPES,
                    DEFAULT_BACKGROUND_STYLE)
from flask_migrate import Migrate

# Extensions
from flask_cors import CORS
from flask_jwt_extended import (JWTManager, jwt_required, get_jwt_identity, get_jwt, create_access_token,
                                set_access_cookies, unset_jwt_cookies)
from werkzeug.security import check_password_hash, generate_password_hash
from sqlalchemy.exc import SQLAlchemyError

from desktop import DEFAULT_WINDOWS, DEFAULT_VIEWPORT, build_desktop_state, default_icon
from payloads import (request_payload, to_columns, parse_bool, parse_int, PROJECT_FIELDS, PROJECT_ARRAY_FIELDS,
                      CONTENT_FIELDS, WINDOW_FIELDS, WINDOW_BOOL_FIELDS, PANEL_FIELDS, CONTACT_LINK_FIELDS,
                      BACKGROUND_FIELDS, BACKGROUND_COLUMNS)
from uploads import save_first_upload, save_upload

REQUIRED_ENV_VARS = ('DATABASE_URL', 'JWT_SECRET', 'ADMIN_EMAIL', 'ADMIN_PASSWORD')
OPTIONAL_ENV_VARS = ('CORS_ORIGINS', 'UPLOAD_FOLDER', 'SITE_TITLE')

BASE_DIR = os.path.abspath(os.path.dirname(__file__))


def validate_env(environ=os.environ):
    missing = [name for name in REQUIRED_ENV_VARS if not environ.get(name)]
    warnings = [f"Optional: {name} is not set" for name in OPTIONAL_ENV_VARS if not environ.get(name)]
    return {"valid": not missing, "missing": missing, "warnings": warnings}


app = Flask(__name__)

cors_origins = [o.strip() for o in os.environ.get('CORS_ORIGINS', 'http://localhost:3000').split(',') if o.strip()]
CORS(app,
     resources={r"/api/*": {
         "origins": cors_origins,
         "methods": ["GET", "POST", "PUT", "DELETE", "OPTIONS"],
         "allow_headers": ["Content-Type", "Authorization"]
     }},
     supports_credentials=True
)

# --- Database Configuration ---
uri = os.environ.get('DATABASE_URL')
if uri:
    if uri.startswith("postgres://"):
        uri = uri.replace("postgres://", "postgresql://", 1)
else:
    uri = f'sqlite:///{os.path.join(BASE_DIR, "portfolio.db")}'

app.config['SQLALCHEMY_DATABASE_URI'] = uri
app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False

db.init_app(app)
migrate = Migrate(app, db)

# --- Admin session: JWT kept in an HTTP-only cookie ---
is_production = os.environ.get('APP_ENV', os.environ.get('FLASK_ENV', '')) == 'production'
app.config['JWT_SECRET_KEY'] = os.environ.get('JWT_SECRET') or 'dev-only-portfolio-secret-change-me'
app.config['JWT_TOKEN_LOCATION'] = ['cookies', 'headers']
app.config['JWT_ACCESS_COOKIE_NAME'] = 'auth-token'
app.config['JWT_ACCESS_TOKEN_EXPIRES'] = timedelta(hours=24)
app.config['JWT_COOKIE_SECURE'] = is_production
app.config['JWT_COOKIE_SAMESITE'] = 'Strict'
app.config['JWT_COOKIE_CSRF_PROTECT'] = False
jwt = JWTManager(app)

app.config['ADMIN_EMAIL'] = os.environ.get('ADMIN_EMAIL')
admin_password = os.environ.get('ADMIN_PASSWORD')
app.config['ADMIN_PASSWORD_HASH'] = generate_password_hash(admin_password) if admin_password else None

app.config['UPLOAD_FOLDER'] = os.environ.get('UPLOAD_FOLDER') or os.path.join(BASE_DIR, 'uploads')
app.config['SITE_TITLE'] = os.environ.get('SITE_TITLE') or 'Portfolio'

env_report = validate_env()
if not env_report["valid"]:
    app.logger.warning("Missing required environment variables: %s", ", ".join(env_report["missing"]))
if not os.environ.get('JWT_SECRET'):
    app.logger.warning("JWT_SECRET not set. Using an insecure development key.")


# --- ERROR RESPONSES ---

def error_response(message, status):
    return jsonify({"error": message}), status


@jwt.unauthorized_loader
def missing_token(reason):
    return error_response("Authentication required", 401)


@jwt.invalid_token_loader
def invalid_token(reason):
    return error_response("Authentication required", 401)


@jwt.expired_token_loader
def expired_token(jwt_header, jwt_payload):
    return error_response("Authentication required", 401)


@app.errorhandler(404)
def not_found(e):
    return error_response("Not found", 404)


@app.errorhandler(405)
def method_not_allowed(e):
    return error_response("Method not allowed", 405)


def admin_required(fn):
    @wraps(fn)
    @jwt_required()
    def wrapper(*args, **kwargs):
        if get_jwt().get("role") != "admin":
            return error_response("Admin access only", 403)
        return fn(*args, **kwargs)
    return wrapper


def requested_id(value, label):
    """Parse an id from a query string or payload; None when absent or invalid."""
    if value in (None, ''):
        return None
    try:
        return parse_int(value, label)
    except ValueError:
        return None


def read_payload(folder, image_field, **coercions):
    """Request body plus an uploaded image stored locally under ``folder``."""
    data = request_payload(**coercions)
    url = save_first_upload(request.files, app.config['UPLOAD_FOLDER'], folder)
    if url:
        data[image_field] = url
    return data


# --- API ROUTES ---

@app.route("/ping")
def ping():
    return "pong", 200


## AUTHENTICATION ROUTES ##

@app.route('/api/auth/login', methods=['POST'])
def login():
    data = request.get_json(silent=True) or {}
    email = data.get('email')
    password = data.get('password')

    if not email or not password:
        return error_response("Email and password are required", 400)

    admin_email = app.config['ADMIN_EMAIL']
    password_hash = app.config['ADMIN_PASSWORD_HASH']
    if not admin_email or not password_hash:
        app.logger.error("Admin credentials not configured in environment variables")
        return error_response("Server configuration error", 500)

    if email != admin_email or not check_password_hash(password_hash, password):
        return error_response("Invalid credentials", 401)

    access_token = create_access_token(identity=admin_email, additional_claims={"role": "admin"})
    response = jsonify({"success": True, "user": {"email": admin_email, "role": "admin"}})
    set_access_cookies(response, access_token)
    return response, 200


@app.route('/api/auth/check', methods=['GET'])
@jwt_required(optional=True)
def auth_check():
    identity = get_jwt_identity()
    if not identity:
        return jsonify({"isAuthenticated": False}), 401
    return jsonify({
        "isAuthenticated": True,
        "user": {"email": identity, "role": get_jwt().get("role")}
    })


@app.route('/api/auth/logout', methods=['POST'])
def logout():
    response = jsonify({"success": True})
    unset_jwt_cookies(response)
    return response, 200


## PROJECT ROUTES ##

@app.route('/api/projects', methods=['GET'])
def get_projects():
    category = request.args.get('category')

    query = Project.query.filter_by(is_active=True)
    if category:
        query = query.filter_by(category=category)

    try:
        projects = query.order_by(Project.order_index.asc(), Project.id.asc()).all()
    except SQLAlchemyError as e:
        app.logger.error(f"Projects GET error: {e}")
        return error_response("Failed to fetch projects", 500)

    return jsonify([p.to_dict() for p in projects])


@app.route('/api/projects/<int:project_id>', methods=['GET'])
def get_project(project_id):
    project = db.session.get(Project, project_id)
    if not project:
        return error_response("Project not found", 404)
    return jsonify(project.to_dict())


@app.route('/api/projects', methods=['POST'])
@admin_required
def create_project():
    try:
        data = read_payload('projects', 'imageUrl', array_fields=PROJECT_ARRAY_FIELDS,
                            int_fields=('orderIndex',), bool_fields=('isActive',))
    except ValueError as e:
        return error_response(str(e), 400)

    if not data.get('title') or not data.get('category'):
        return error_response("Title and category are required", 400)
    if data['category'] not in PROJECT_CATEGORIES:
        return error_response(f"Invalid category: {data['category']}", 400)

    new_project = Project(
        title=data['title'],
        description=data.get('description') or '',
        category=data['category'],
        image_url=data.get('imageUrl') or '',
        photos=data.get('photos') or [],
        keywords=data.get('keywords') or [],
        project_link=data.get('projectLink') or '',
        tags=data.get('tags') or [],
        order_index=data.get('orderIndex') or 0,
        is_active=True,
        custom_tab_key=data.get('customTabKey') or None
    )

    try:
        db.session.add(new_project)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        app.logger.error(f"Projects POST error: {e}")
        return error_response("Failed to create project", 500)

    return jsonify(new_project.to_dict()), 201


@app.route('/api/projects', methods=['PUT'])
@admin_required
def update_project():
    try:
        data = read_payload('projects', 'imageUrl', array_fields=PROJECT_ARRAY_FIELDS,
                            int_fields=('id', 'orderIndex'), bool_fields=('isActive',))
    except ValueError as e:
        return error_response(str(e), 400)

    project_id = requested_id(data.get('id'), 'id')
    if not project_id:
        return error_response("Project ID is required", 400)
    if 'category' in data and data['category'] not in PROJECT_CATEGORIES:
        return error_response(f"Invalid category: {data['category']}", 400)

    project = db.session.get(Project, project_id)
    if not project:
        return error_response("Project not found", 404)

    for column, value in to_columns(data, PROJECT_FIELDS).items():
        setattr(project, column, value)

    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        app.logger.error(f"Projects PUT error: {e}")
        return error_response("Failed to update project", 500)

    return jsonify(project.to_dict())


@app.route('/api/projects', methods=['DELETE'])
@admin_required
def delete_project():
    project_id = requested_id(request.args.get('id'), 'id')
    if not project_id:
        return error_response("Project ID is required", 400)

    project = db.session.get(Project, project_id)
    if not project:
        return error_response("Project not found", 404)

    # Soft delete: the row stays for the admin archive
    project.is_active = False
    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        app.logger.error(f"Projects DELETE error: {e}")
        return error_response("Failed to delete project", 500)

    return jsonify({"success": True})


## CONTENT ROUTES ##

@app.route('/api/content', methods=['GET'])
def get_content():
    section = request.args.get('section')

    if section:
        entry = Content.query.filter_by(section=section).first()
        if not entry:
            return jsonify({"section": section, "title": "", "content": "", "imageUrl": ""})
        return jsonify(entry.to_dict())

    return jsonify([c.to_dict() for c in Content.query.order_by(Content.id).all()])


@app.route('/api/content', methods=['PUT'])
@admin_required
def update_content():
    try:
        data = read_payload('content', 'imageUrl')
    except ValueError as e:
        return error_response(str(e), 400)

    section = data.get('section')
    if not section:
        return error_response("Section is required", 400)

    entry = Content.query.filter_by(section=section).first()
    if not entry:
        entry = Content(section=section, title='', content='')
        db.session.add(entry)

    for column, value in to_columns(data, CONTENT_FIELDS).items():
        setattr(entry, column, value)

    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        app.logger.error(f"Content PUT error: {e}")
        return error_response("Failed to update content", 500)

    return jsonify(entry.to_dict())


## FAQ ROUTES ##

@app.route('/api/faq', methods=['GET'])
def get_faq():
    items = FaqItem.query.filter_by(is_active=True).order_by(FaqItem.order.asc(), FaqItem.id.asc()).all()
    return jsonify([item.to_dict() for item in items])


@app.route('/api/faq', methods=['POST', 'PUT'])
@admin_required
def save_faq():
    try:
        data = request_payload(int_fields=('id', 'order'), bool_fields=('isActive',))
    except ValueError as e:
        return error_response(str(e), 400)

    if not data.get('question') or not data.get('answer'):
        return error_response("Question and answer are required", 400)

    faq_id = requested_id(data.get('id'), 'id')
    if faq_id:
        item = db.session.get(FaqItem, faq_id)
        if not item:
            return error_response("FAQ item not found", 404)
        status = 200
    else:
        item = FaqItem()
        db.session.add(item)
        status = 201

    item.question = data['question']
    item.answer = data['answer']
    item.order = data.get('order') or 0
    item.is_active = True if status == 201 else data.get('isActive') is not False
    item.custom_tab_key = data.get('customTabKey') or None

    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        app.logger.error(f"FAQ {request.method} error: {e}")
        return error_response("Failed to save FAQ", 500)

    return jsonify(item.to_dict()), status


@app.route('/api/faq', methods=['DELETE'])
@admin_required
def delete_faq():
    faq_id = requested_id(request.args.get('id'), 'id')
    if not faq_id:
        return error_response("FAQ ID is required", 400)

    item = db.session.get(FaqItem, faq_id)
    if not item:
        return error_response("FAQ item not found", 404)

    item.is_active = False
    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        app.logger.error(f"FAQ DELETE error: {e}")
        return error_response("Failed to delete FAQ", 500)

    return jsonify({"success": True})


## WINDOW ROUTES ##

@app.route('/api/windows', methods=['GET'])
def get_windows():
    windows = Window.query.order_by(Window.order_desktop.asc(), Window.id.asc()).all()
    return jsonify([w.to_dict() for w in windows])


@app.route('/api/windows', methods=['POST'])
@admin_required
def create_window():
    try:
        data = request_payload(int_fields=('orderDesktop', 'orderHome'), bool_fields=WINDOW_BOOL_FIELDS)
    except ValueError as e:
        return error_response(str(e), 400)

    key = data.get('key') or f"custom-{int(time.time() * 1000)}"
    window_type = data.get('type') or 'custom'
    layout = data.get('layout') or 'content'

    if window_type not in WINDOW_TYPES:
        return error_response(f"Invalid window type: {window_type}", 400)
    if layout not in WINDOW_LAYOUTS:
        return error_response(f"Invalid layout: {layout}", 400)
    if Window.query.filter_by(key=key).first():
        return error_response(f"Window key already exists: {key}", 400)

    new_window = Window(
        key=key,
        label=data.get('label') or 'New Window',
        type=window_type,
        show_on_desktop=data.get('showOnDesktop') is not False,
        show_in_home=data.get('showInHome') is not False,
        order_desktop=data.get('orderDesktop') or 99,
        order_home=data.get('orderHome') or 99,
        is_hidden=bool(data.get('isHidden')),
        content=data.get('content') or '',
        icon=data.get('icon') or default_icon(key),
        layout=layout,
        is_archived=False
    )

    try:
        db.session.add(new_window)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        app.logger.error(f"Windows POST error: {e}")
        return error_response("Failed to create window", 500)

    return jsonify(new_window.to_dict()), 201


@app.route('/api/windows', methods=['PUT'])
@admin_required
def update_window():
    try:
        data = read_payload('window-icons', 'customIconUrl', int_fields=('id', 'orderDesktop', 'orderHome'),
                            bool_fields=WINDOW_BOOL_FIELDS)
    except ValueError as e:
        return error_response(str(e), 400)

    window_id = requested_id(data.get('id'), 'id')
    if not window_id:
        return error_response("Window ID is required", 400)
    if 'layout' in data and data['layout'] not in WINDOW_LAYOUTS:
        return error_response(f"Invalid layout: {data['layout']}", 400)

    window = db.session.get(Window, window_id)
    if not window:
        return error_response("Window not found", 404)

    if data.get('key') and data['key'] != window.key and Window.query.filter_by(key=data['key']).first():
        return error_response(f"Window key already exists: {data['key']}", 400)

    for column, value in to_columns(data, WINDOW_FIELDS).items():
        setattr(window, column, value)

    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        app.logger.error(f"Windows PUT error: {e}")
        return error_response("Failed to update window", 500)

    return jsonify(window.to_dict())


@app.route('/api/windows', methods=['DELETE'])
@admin_required
def delete_window():
    window_id = requested_id(request.args.get('id'), 'id')
    if not window_id:
        return error_response("Window ID is required", 400)

    window = db.session.get(Window, window_id)
    if not window:
        return error_response("Window not found", 404)

    try:
        db.session.delete(window)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        app.logger.error(f"Windows DELETE error: {e}")
        return error_response("Failed to delete window", 500)

    return jsonify({"success": True})


@app.route('/api/init-windows', methods=['GET'])
def init_windows():
    results = []
    try:
        for default in DEFAULT_WINDOWS:
            existing = Window.query.filter_by(key=default['key']).first()
            if existing:
                results.append({"key": default['key'], "status": "exists", "id": existing.id})
                continue

            window = Window(type='builtIn', is_hidden=False, is_archived=False, content='', **default)
            db.session.add(window)
            db.session.flush()
            results.append({"key": default['key'], "status": "created", "id": window.id})

        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        app.logger.error(f"Init windows error: {e}")
        return error_response("Failed to initialize windows", 500)

    return jsonify({"success": True, "message": "Default windows initialized", "results": results})


## CUSTOM PANEL ROUTES ##

@app.route('/api/custom-panels', methods=['GET'])
def get_custom_panels():
    key = request.args.get('key')
    query = Window.query.filter_by(type='custom')

    if key:
        panel = query.filter_by(key=key).first()
        if not panel:
            return error_response("Custom panel not found", 404)
        return jsonify(panel.to_dict())

    return jsonify([w.to_dict() for w in query.order_by(Window.order_desktop.asc(), Window.id.asc()).all()])


@app.route('/api/custom-panels', methods=['PUT'])
@admin_required
def update_custom_panel():
    try:
        data = request_payload()
        icon_url = save_first_upload(request.files, app.config['UPLOAD_FOLDER'], 'panel-icons', field='icon')
    except ValueError as e:
        return error_response(str(e), 400)
    if icon_url:
        data['customIconUrl'] = icon_url

    key = data.get('key')
    if not key:
        return error_response("Key is required", 400)
    if 'layout' in data and data['layout'] not in WINDOW_LAYOUTS:
        return error_response(f"Invalid layout: {data['layout']}", 400)

    panel = Window.query.filter_by(key=str(key), type='custom').first()
    if not panel:
        return error_response("Custom panel not found", 404)

    for column, value in to_columns(data, PANEL_FIELDS).items():
        setattr(panel, column, value)

    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        app.logger.error(f"Custom Panels PUT error: {e}")
        return error_response("Failed to update custom panel", 500)

    return jsonify(panel.to_dict())


## BACKGROUND ROUTES ##

def background_config():
    config = {mode: dict(DEFAULT_BACKGROUND_STYLE) for mode in BACKGROUND_MODES}
    for row in Background.query.all():
        if row.mode in BACKGROUND_MODES:
            config[row.mode] = row.to_style()
    return config


@app.route('/api/background', methods=['GET'])
def get_background():
    return jsonify(background_config())


@app.route('/api/background', methods=['PUT'])
@admin_required
def update_background():
    try:
        data = read_payload('backgrounds', 'imageUrl')
    except ValueError as e:
        return error_response(str(e), 400)

    mode = data.get('mode') or request.args.get('mode') or 'desktop'
    background_type = data.get('type') or 'solid'
    if mode not in BACKGROUND_MODES:
        return error_response(f"Invalid mode: {mode}", 400)
    if background_type not in BACKGROUND_TYPES:
        return error_response(f"Invalid background type: {background_type}", 400)

    row = Background.query.filter_by(mode=mode).first()
    if not row:
        row = Background(mode=mode)
        db.session.add(row)

    row.type = background_type
    row.overlay = parse_bool(data.get('overlay'))
    style = {field: data.get(field) or DEFAULT_BACKGROUND_STYLE.get(field) for field in BACKGROUND_FIELDS}
    for column, value in to_columns(style, BACKGROUND_FIELDS, renames=BACKGROUND_COLUMNS).items():
        setattr(row, column, value)

    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        app.logger.error(f"Background PUT error: {e}")
        return error_response("Failed to update background", 500)

    return jsonify({"success": True})


## CONTACT LINK ROUTES ##

@app.route('/api/contact-links', methods=['GET'])
def get_contact_links():
    links = ContactLink.query.order_by(ContactLink.order.asc(), ContactLink.id.asc()).all()
    return jsonify([link.to_dict() for link in links])


@app.route('/api/contact-links', methods=['POST', 'PUT'])
@admin_required
def save_contact_link():
    try:
        data = read_payload('icons', 'iconUrl', int_fields=('id', 'order'),
                            bool_fields=('isActive', 'showOnDesktop'))
    except ValueError as e:
        return error_response(str(e), 400)

    if not data.get('name') or not data.get('url'):
        return error_response("Name and URL are required", 400)

    link_id = requested_id(data.get('id'), 'id')
    if link_id:
        link = db.session.get(ContactLink, link_id)
        if not link:
            return error_response("Contact link not found", 404)
        for column, value in to_columns(data, CONTACT_LINK_FIELDS).items():
            setattr(link, column, value)
        status = 200
    else:
        link = ContactLink(
            name=data['name'],
            url=data['url'],
            icon_url=data.get('iconUrl') or '',
            order=data.get('order') or 0,
            is_active=data.get('isActive') is not False,
            show_on_desktop=data.get('showOnDesktop') is not False
        )
        db.session.add(link)
        status = 201

    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        app.logger.error(f"Contact links {request.method} error: {e}")
        return error_response("Failed to save contact link", 500)

    return jsonify(link.to_dict()), status


@app.route('/api/contact-links', methods=['DELETE'])
@admin_required
def delete_contact_link():
    link_id = requested_id(request.args.get('id'), 'id')
    if not link_id:
        return error_response("Contact link ID is required", 400)

    link = db.session.get(ContactLink, link_id)
    if not link:
        return error_response("Contact link not found", 404)

    try:
        db.session.delete(link)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        app.logger.error(f"Contact links DELETE error: {e}")
        return error_response("Failed to delete contact link", 500)

    return jsonify({"success": True})


## SITE CONFIG ROUTES ##

def site_config():
    config = {"title": app.config['SITE_TITLE'], "faviconUrl": None}
    config.update(SiteSetting.load(SITE_CONFIG_KEY))
    return config


@app.route('/api/site-config', methods=['GET'])
def get_site_config():
    return jsonify(site_config())


@app.route('/api/site-config', methods=['POST'])
@admin_required
def update_site_config():
    data = request_payload()

    favicon = next((f for f in request.files.values() if f and f.filename), None)
    if favicon:
        try:
            data['faviconUrl'] = save_upload(favicon, app.config['UPLOAD_FOLDER'], 'site', prefix='favicon-')
        except ValueError as e:
            return error_response(str(e), 400)

    current = site_config()
    new_config = {
        "title": data.get('title') or current['title'],
        "faviconUrl": (data['faviconUrl'] or None) if 'faviconUrl' in data else current['faviconUrl'],
    }

    try:
        SiteSetting.store(SITE_CONFIG_KEY, new_config)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        app.logger.error(f"Site config POST error: {e}")
        return error_response("Failed to save site config", 500)

    return jsonify({"success": True, "config": new_config})


## UPLOAD ROUTES ##

@app.route('/api/upload', methods=['POST'])
@admin_required
def upload_image():
    image = request.files.get('image')
    if not image or not image.filename:
        return error_response("No file uploaded", 400)

    try:
        url = save_upload(image, app.config['UPLOAD_FOLDER'], 'uploads')
    except ValueError as e:
        return error_response(str(e), 400)

    return jsonify({"url": url})


@app.route('/uploads/<path:filename>')
def uploaded_file(filename):
    return send_from_directory(app.config['UPLOAD_FOLDER'], filename)


## PUBLIC DESKTOP ##

def viewport_from_args():
    width = request.args.get('width', DEFAULT_VIEWPORT[0], type=int)
    height = request.args.get('height', DEFAULT_VIEWPORT[1], type=int)
    return (width, height)


def desktop_state(viewport=DEFAULT_VIEWPORT):
    sections = {c.section: c.to_dict() for c in Content.query.all()}
    return build_desktop_state(
        windows=[w.to_dict() for w in Window.query.all()],
        contact_links=[link.to_dict() for link in ContactLink.query.all()],
        background=background_config(),
        content=sections,
        projects=[p.to_dict() for p in Project.query.filter_by(is_active=True).order_by(Project.order_index).all()],
        faq_items=[f.to_dict() for f in FaqItem.query.filter_by(is_active=True).order_by(FaqItem.order).all()],
        site_config=site_config(),
        viewport=viewport,
    )


@app.route('/api/desktop', methods=['GET'])
def get_desktop():
    return jsonify(desktop_state(viewport_from_args()))


@app.route('/')
def index():
    return render_template('index.html', desktop=desktop_state())


if __name__ == '__main__':
    app.run(host="0.0.0.0", port=5000, debug=not is_production)
