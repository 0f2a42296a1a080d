"""Initial schema: users, posts, likes, comments, rentals, badges

Revision ID: 001
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = '001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('email', sa.String(), nullable=True),
        sa.Column('first_name', sa.String(), nullable=True),
        sa.Column('last_name', sa.String(), nullable=True),
        sa.Column('profile_image_url', sa.String(), nullable=True),
        sa.Column('bio', sa.Text(), nullable=True),
        sa.Column('location', sa.String(), nullable=True),
        sa.Column('username', sa.String(), nullable=True),
        sa.Column('eco_points', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('water_saved', sa.Numeric(10, 2), nullable=False, server_default='0'),
        sa.Column('carbon_reduced', sa.Numeric(10, 2), nullable=False, server_default='0'),
        sa.Column('items_reused', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint('email'),
        sa.UniqueConstraint('username'),
        sa.CheckConstraint("eco_points >= 0", name="users_eco_points_non_negative"),
        sa.CheckConstraint("water_saved >= 0", name="users_water_saved_non_negative"),
        sa.CheckConstraint("carbon_reduced >= 0", name="users_carbon_reduced_non_negative"),
        sa.CheckConstraint("items_reused >= 0", name="users_items_reused_non_negative"),
    )
    op.create_index('ix_users_eco_points', 'users', ['eco_points'])

    op.create_table(
        'posts',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('image_url', sa.String(), nullable=False),
        sa.Column('caption', sa.Text(), nullable=True),
        sa.Column('tags', sa.JSON(), nullable=False),
        sa.Column('thrift_store', sa.String(), nullable=True),
        sa.Column('price_paid', sa.Numeric(8, 2), nullable=True),
        sa.Column('original_brand', sa.String(), nullable=True),
        sa.Column('size', sa.String(), nullable=True),
        sa.Column('available_for_rent', sa.Boolean(), nullable=False),
        sa.Column('rent_price', sa.Numeric(8, 2), nullable=True),
        sa.Column('eco_points', sa.Integer(), nullable=False),
        sa.Column('water_saved', sa.Numeric(8, 2), nullable=False),
        sa.Column('carbon_reduced', sa.Numeric(8, 2), nullable=False),
        sa.Column('likes_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('comments_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.CheckConstraint("eco_points >= 0", name="posts_eco_points_non_negative"),
        sa.CheckConstraint("water_saved >= 0", name="posts_water_saved_non_negative"),
        sa.CheckConstraint("carbon_reduced >= 0", name="posts_carbon_reduced_non_negative"),
    )
    op.create_index('ix_posts_user_id', 'posts', ['user_id'])
    op.create_index('ix_posts_available_for_rent', 'posts', ['available_for_rent'])
    op.create_index('ix_posts_created_at', 'posts', ['created_at'])

    op.create_table(
        'likes',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('post_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['post_id'], ['posts.id'], ondelete='CASCADE'),
        sa.UniqueConstraint('user_id', 'post_id', name='likes_user_post_unique'),
    )
    op.create_index('ix_likes_user_id', 'likes', ['user_id'])
    op.create_index('ix_likes_post_id', 'likes', ['post_id'])

    op.create_table(
        'comments',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('post_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['post_id'], ['posts.id'], ondelete='CASCADE'),
        sa.CheckConstraint("LENGTH(TRIM(content)) > 0", name="comments_content_not_empty"),
    )
    op.create_index('ix_comments_user_id', 'comments', ['user_id'])
    op.create_index('ix_comments_post_id', 'comments', ['post_id'])
    op.create_index('ix_comments_created_at', 'comments', ['created_at'])

    op.create_table(
        'rental_requests',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('requester_id', sa.String(), nullable=False),
        sa.Column('post_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('owner_id', sa.String(), nullable=False),
        sa.Column('start_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('end_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('status', sa.String(20), nullable=False, server_default='pending'),
        sa.Column('total_price', sa.Numeric(8, 2), nullable=True),
        sa.Column('message', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(['requester_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['post_id'], ['posts.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['owner_id'], ['users.id'], ondelete='CASCADE'),
        sa.CheckConstraint("end_date >= start_date", name="rental_requests_dates_ordered"),
    )
    op.create_index('ix_rental_requests_requester_id', 'rental_requests', ['requester_id'])
    op.create_index('ix_rental_requests_post_id', 'rental_requests', ['post_id'])
    op.create_index('ix_rental_requests_owner_id', 'rental_requests', ['owner_id'])
    op.create_index('ix_rental_requests_status', 'rental_requests', ['status'])
    op.create_index('ix_rental_requests_created_at', 'rental_requests', ['created_at'])

    op.create_table(
        'badges',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('icon', sa.String(), nullable=True),
        sa.Column('requirement', sa.String(), nullable=False),
        sa.Column('sort_order', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint('name'),
    )

    op.create_table(
        'user_badges',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('badge_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('earned_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['badge_id'], ['badges.id'], ondelete='CASCADE'),
        sa.UniqueConstraint('user_id', 'badge_id', name='user_badges_user_badge_unique'),
    )
    op.create_index('ix_user_badges_user_id', 'user_badges', ['user_id'])
    op.create_index('ix_user_badges_badge_id', 'user_badges', ['badge_id'])


def downgrade():
    op.drop_table('user_badges')
    op.drop_table('badges')
    op.drop_table('rental_requests')
    op.drop_table('comments')
    op.drop_table('likes')
    op.drop_table('posts')
    op.drop_table('users')
