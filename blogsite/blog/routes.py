"""
Blog Routes

Home page listing, post detail and post authoring.
"""

from flask import render_template, request, redirect, url_for, flash, abort, current_app
from flask_login import login_required, current_user

from blogsite.blog import blog_bp
from blogsite.blog.services import list_posts, get_post, create_post, validate_post_form


@blog_bp.route('/')
def index():
    """Home page with every post"""
    posts = list_posts()
    return render_template('blog/index.html', posts=posts)


@blog_bp.route('/posts/<post_id>')
def post_detail(post_id):
    """Single post page"""
    post = get_post(post_id)
    if post is None:
        abort(404)
    return render_template('blog/post_detail.html', post=post)


@blog_bp.route('/posts/new', methods=['GET', 'POST'])
@login_required
def new_post():
    """Write a new post as the signed-in user"""
    if request.method == 'POST':
        title = request.form.get('title', '').strip()
        content = request.form.get('content', '').strip()
        image_url = request.form.get('image_url', '').strip()
        
        errors = validate_post_form(title, content, current_app.config['POST_TITLE_MAX_LENGTH'])
        if errors:
            for message in errors:
                flash(message, 'danger')
            return render_template('blog/new_post.html', form=request.form), 400
        
        post = create_post(title, content, current_user, image_url=image_url)
        flash('Post published!', 'success')
        return redirect(url_for('blog.post_detail', post_id=post.id))
    
    return render_template('blog/new_post.html', form={})
