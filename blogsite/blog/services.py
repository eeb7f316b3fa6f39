"""
Blog Services

Queries and writes against the post store.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from blogsite.errors import PostStoreError
from blogsite.extensions import db
from blogsite.models import BlogPost

logger = logging.getLogger(__name__)

# Fields returned by the post listing, in this order
POST_LIST_FIELDS = (
    'title',
    'content',
    'image_url',
    'author_image',
    'author_name',
    'id',
    'created_at',
)


def list_posts():
    """Return every stored post projected to POST_LIST_FIELDS.
    
    Order is whatever the store returns. A failing store raises
    PostStoreError instead of yielding an empty list.
    """
    columns = [getattr(BlogPost, field).label(field) for field in POST_LIST_FIELDS]
    try:
        rows = db.session.query(*columns).all()
    except SQLAlchemyError as e:
        logger.exception('Listing posts failed')
        raise PostStoreError('Listing posts failed') from e
    
    return [dict(row._mapping) for row in rows]


def get_post(post_id):
    """Return the post with `post_id`, or None."""
    try:
        return db.session.get(BlogPost, post_id)
    except SQLAlchemyError as e:
        logger.exception('Loading post %s failed', post_id)
        raise PostStoreError('Loading post failed') from e


def validate_post_form(title, content, max_title_length):
    """Return a list of validation messages; empty when the input is valid."""
    errors = []
    if not title:
        errors.append('Title is required.')
    elif len(title) > max_title_length:
        errors.append(f'Title must be at most {max_title_length} characters long.')
    if not content:
        errors.append('Content is required.')
    return errors


def create_post(title, content, author, image_url=None):
    """Store a new post, copying the author's details from their profile.
    
    Args:
        title: post title
        content: post body
        author: SessionUser of the signed-in user
        image_url: optional cover image URL
    """
    post = BlogPost(
        title=title,
        content=content,
        image_url=image_url or None,
        author_id=author.get_id(),
        author_name=author.display_name,
        author_image=author.picture,
    )
    try:
        db.session.add(post)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception('Creating post failed')
        raise PostStoreError('Creating post failed') from e
    
    logger.info('Post %s created by %s', post.id, post.author_id)
    return post
