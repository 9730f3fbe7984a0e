"""
代码示例目录：示例类型 -> 示例代码。键集合固定，不在运行时修改。
"""

COMPONENT_EXAMPLE = """
// Good: Modern Angular component with signals
import { Component, input, output, computed, ChangeDetectionStrategy } from '@angular/core';
import { CommonModule } from '@angular/common';

@Component({
  selector: 'app-user-card',
  template: `
    <div class="user-card" 
         [class.active]="isActive()"
         [style.background-color]="backgroundColor()">
      @if (user(); as currentUser) {
        <h3>{{ currentUser.name }}</h3>
        <p>{{ currentUser.email }}</p>
        @if (showActions()) {
          <button (click)="onEdit()">Edit</button>
        }
      }
    </div>
  `,
  changeDetection: ChangeDetectionStrategy.OnPush,
  imports: [CommonModule]
})
export class UserCardComponent {
  user = input.required<User>();
  showActions = input(false);
  userUpdated = output<User>();
  
  backgroundColor = computed(() => this.isActive() ? '#e3f2fd' : '#fff');
  isActive = computed(() => this.user()?.status === 'active');
  
  onEdit() {
    this.userUpdated.emit(this.user());
  }
}
  """

SERVICE_EXAMPLE = """
// Good: Modern Angular service with inject()
import { Injectable, inject } from '@angular/core';
import { HttpClient } from '@angular/common/http';
import { Observable, signal } from 'rxjs';

@Injectable({
  providedIn: 'root'
})
export class UserService {
  private http = inject(HttpClient);
  private users = signal<User[]>([]);
  
  readonly users$ = this.users.asReadonly();
  
  loadUsers(): Observable<User[]> {
    return this.http.get<User[]>('/api/users');
  }
  
  updateUsers(users: User[]) {
    this.users.set(users);
  }
}
  """

CODE_EXAMPLES = {
    "component": COMPONENT_EXAMPLE,
    "service": SERVICE_EXAMPLE,
}
