"""
Blog Post Model
"""

import uuid
from datetime import datetime

from blogsite.extensions import db


def _new_post_id():
    return uuid.uuid4().hex


class BlogPost(db.Model):
    """A published blog post.

    Author attributes are copied from the session user when the post is
    created; there is no foreign key to a user table.
    """
    __tablename__ = 'blog_posts'
    
    id = db.Column(db.String(32), primary_key=True, default=_new_post_id)
    title = db.Column(db.String(200), nullable=False)
    content = db.Column(db.Text, nullable=False)
    image_url = db.Column('imageURL', db.Text)
    
    # Denormalized author snapshot
    author_id = db.Column('authorId', db.String(255), index=True)
    author_name = db.Column('authorName', db.String(255))
    author_image = db.Column('authorImage', db.Text)
    
    created_at = db.Column('createAt', db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column('updateAt', db.DateTime, default=datetime.utcnow,
                           onupdate=datetime.utcnow, nullable=False)
    
    def __repr__(self):
        return f'<BlogPost {self.id} {self.title!r}>'
